"""
Alloy hover language server.

A small Language Server Protocol server that answers hover requests from
a static dictionary of documentation snippets.  Editors send the full text
of every open document; when the user hovers a token the server extracts
the word under the cursor and, if the dictionary knows it, replies with the
Markdown payload and the exact range of the token.

The code is organised into a handful of modules:

* ``dictionary`` – loads the ``alloy-hover.toml`` file into an immutable
  key to Markdown mapping.
* ``config`` – resolves the dictionary path and logging options from the
  command line and the environment.
* ``lsp`` – the pygls based server: the document store, the hover
  resolver and the feature handlers wired to the protocol.
* ``cli`` – the ``alloy-hover-lsp`` console entry point.
"""

import tomllib
from importlib import metadata as _metadata
from pathlib import Path

_DISTRIBUTION = "alloy-hover-lsp"
_FALLBACK_VERSION = "0.1.0"


def _source_tree_version() -> str:
    """Version from the checkout's pyproject.toml when the package is not installed."""

    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        with pyproject.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):  # pragma: no cover - broken checkout
        return _FALLBACK_VERSION
    return str(project.get("version") or _FALLBACK_VERSION)


try:
    __version__ = _metadata.version(_DISTRIBUTION)
except _metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
    __version__ = _source_tree_version()

__all__ = ["__version__"]
