"""Language Server Protocol implementation for alloy hover."""

from .server import AlloyHoverLanguageServer, create_server

__all__ = [
    "AlloyHoverLanguageServer",
    "create_server",
]
