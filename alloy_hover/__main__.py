"""
Entry point for running the hover server as a module.

This allows the server to be started with:
    python -m alloy_hover
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
