"""pygls based Language Server entrypoint."""

from __future__ import annotations

from lsprotocol.types import InitializedParams, TextDocumentSyncKind
from pygls.lsp.server import LanguageServer

from alloy_hover import __version__

from ..dictionary import Dictionary
from ..observability.logging import get_logger
from .handlers import register_all
from .workspace import HoverWorkspace

SERVER_NAME = "alloy-hover-lsp"

logger = get_logger("alloy_hover.lsp.server")


class AlloyHoverLanguageServer(LanguageServer):
    """LanguageServer advertising full document sync and hover only."""

    def __init__(self, dictionary: Dictionary) -> None:
        super().__init__(
            name=SERVER_NAME,
            version=__version__,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.hover_workspace = HoverWorkspace(dictionary)
        register_all(self)
        self._register_lifecycle_handlers()

    def _register_lifecycle_handlers(self) -> None:
        workspace = self.hover_workspace

        @self.feature("initialized")
        async def _on_initialized(ls: "AlloyHoverLanguageServer", params: InitializedParams) -> None:  # noqa: ARG001
            logger.info(
                "Client initialised; serving %d hover entries from %s",
                len(workspace.dictionary),
                workspace.dictionary.source or "memory",
            )


def create_server(dictionary: Dictionary) -> AlloyHoverLanguageServer:
    return AlloyHoverLanguageServer(dictionary)


__all__ = ["AlloyHoverLanguageServer", "SERVER_NAME", "create_server"]
