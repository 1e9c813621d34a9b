"""Hover handler."""

from __future__ import annotations

from lsprotocol.types import HoverParams


def register(server) -> None:
    workspace = server.hover_workspace

    @server.feature("textDocument/hover")
    async def _hover(ls, params: HoverParams):
        # Columns follow the encoding agreed during initialize.
        return workspace.hover(params, ls.workspace.position_codec)


__all__ = ["register"]
