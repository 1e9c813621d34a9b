"""Handler registration helpers."""

from __future__ import annotations

from . import documents, hover


def register_all(server) -> None:
    documents.register(server)
    hover.register(server)


__all__ = ["register_all"]
