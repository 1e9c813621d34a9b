from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from lsprotocol.types import TextDocumentItem

from alloy_hover.dictionary import Dictionary
from alloy_hover.lsp.workspace import HoverWorkspace

DATA_DIR = Path(__file__).parent / "data"


def _make_uri(path: Path) -> str:
    return path.resolve().as_uri()


@pytest.fixture()
def dictionary() -> Dictionary:
    return Dictionary.load(DATA_DIR / "alloy-hover.toml")


@pytest.fixture()
def workspace(dictionary: Dictionary) -> HoverWorkspace:
    return HoverWorkspace(dictionary)


@pytest.fixture()
def open_document(workspace: HoverWorkspace) -> Callable[..., TextDocumentItem]:
    def _open(filename: str, *, version: int = 1) -> TextDocumentItem:
        path = DATA_DIR / filename
        text = path.read_text(encoding="utf-8")
        item = TextDocumentItem(
            uri=_make_uri(path),
            language_id="alloy",
            version=version,
            text=text,
        )
        workspace.did_open(item)
        return item

    return _open
