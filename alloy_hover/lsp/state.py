"""Document level state tracking for the hover language server."""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Union

from lsprotocol.types import TextDocumentContentChangeEvent

from ..observability.logging import get_logger

ContentChange = Union[str, TextDocumentContentChangeEvent]


def _change_text(change: ContentChange) -> str:
    if isinstance(change, str):
        return change
    return change.text


class DocumentStore:
    """Full text of every open document, keyed by URI.

    The server syncs documents in full, so every change notification carries
    the complete text and simply replaces what was stored. One lock guards the
    table; readers never observe a half-applied update.
    """

    def __init__(self) -> None:
        self.logger = get_logger("alloy_hover.lsp.state")
        self._lock = threading.RLock()
        self._texts: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def open(self, uri: str, text: str) -> None:
        with self._lock:
            self._texts[uri] = text
        self.logger.debug("Opened %s (%d chars)", uri, len(text))

    def change(self, uri: str, changes: Iterable[ContentChange]) -> None:
        """Apply a batch of full-text changes; only the last one survives."""

        last: Optional[ContentChange] = None
        for last in changes:
            pass
        if last is None:
            return
        text = _change_text(last)
        with self._lock:
            self._texts[uri] = text
        self.logger.debug("Changed %s (%d chars)", uri, len(text))

    def close(self, uri: str) -> None:
        with self._lock:
            removed = self._texts.pop(uri, None)
        if removed is not None:
            self.logger.debug("Closed %s", uri)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, uri: str) -> Optional[str]:
        with self._lock:
            return self._texts.get(uri)

    def uris(self) -> List[str]:
        with self._lock:
            return list(self._texts)

    def __contains__(self, uri: object) -> bool:
        with self._lock:
            return uri in self._texts

    def __len__(self) -> int:
        with self._lock:
            return len(self._texts)


__all__ = ["DocumentStore", "ContentChange"]
