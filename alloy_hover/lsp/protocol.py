"""Shared protocol helpers for the hover language server."""

from __future__ import annotations

from dataclasses import dataclass

from lsprotocol.types import Hover, MarkupContent, MarkupKind, Position, Range


@dataclass(frozen=True, slots=True)
class HoverMatch:
    """A dictionary hit: the payload and the single-line span of the raw token.

    ``start`` and ``end`` are client columns in the negotiated position
    encoding, ``end`` exclusive.
    """

    payload: str
    line: int
    start: int
    end: int

    def to_range(self) -> Range:
        return Range(
            start=Position(line=self.line, character=self.start),
            end=Position(line=self.line, character=self.end),
        )

    def to_hover(self) -> Hover:
        return Hover(
            contents=MarkupContent(kind=MarkupKind.Markdown, value=self.payload),
            range=self.to_range(),
        )


__all__ = ["HoverMatch"]
