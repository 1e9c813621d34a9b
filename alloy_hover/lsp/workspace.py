"""Ties the document store and the dictionary to LSP request types."""

from __future__ import annotations

from typing import Optional, Sequence

from lsprotocol.types import Hover, HoverParams, TextDocumentItem
from pygls.workspace import PositionCodec

from ..dictionary import Dictionary
from ..observability.logging import get_logger
from .resolver import resolve
from .state import ContentChange, DocumentStore


class HoverWorkspace:
    """Open documents plus the dictionary used to answer hover requests."""

    def __init__(self, dictionary: Dictionary, store: Optional[DocumentStore] = None) -> None:
        self.logger = get_logger("alloy_hover.lsp.workspace")
        self.dictionary = dictionary
        self.store = store if store is not None else DocumentStore()

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def did_open(self, item: TextDocumentItem) -> None:
        self.store.open(item.uri, item.text)

    def did_change(self, uri: str, changes: Sequence[ContentChange]) -> None:
        self.store.change(uri, changes)

    def did_close(self, uri: str) -> None:
        self.store.close(uri)

    def document(self, uri: str) -> Optional[str]:
        return self.store.get(uri)

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def hover(self, params: HoverParams, codec: Optional[PositionCodec] = None) -> Optional[Hover]:
        uri = params.text_document.uri
        text = self.store.get(uri)
        if text is None:
            self.logger.debug("Hover for unknown document %s", uri)
            return None
        position = params.position
        match = resolve(text, position.line, position.character, self.dictionary, codec)
        if match is None:
            return None
        return match.to_hover()


__all__ = ["HoverWorkspace"]
