"""Maps a cursor position to a dictionary key and back to a source range.

Columns arrive and leave in the position encoding negotiated with the client
(UTF-16 unless the client asked otherwise); pygls's ``PositionCodec`` converts
them. Internally every scan works on Python string indices.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from lsprotocol.types import Position, Range
from pygls.workspace import PositionCodec

from ..dictionary import Dictionary
from .protocol import HoverMatch

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_QUOTE = '"'
_DEFAULT_CODEC = PositionCodec()


def is_word_char(char: str) -> bool:
    """Letters, digits, ``_`` and ``.`` so dotted names stay one token."""

    return char.isalnum() or char in "_."


def line_at(text: str, line: int) -> str:
    if line < 0:
        return ""
    lines = _LINE_BREAK.split(text)
    if line >= len(lines):
        return ""
    return lines[line]


def column_to_index(line_text: str, character: int, codec: PositionCodec) -> int:
    """Convert a client column on ``line_text`` into a string index.

    A column at or past the end of the line maps to ``len(line_text)``.
    """

    if character >= codec.client_num_units(line_text):
        return len(line_text)
    position = Position(line=0, character=max(character, 0))
    return codec.position_from_client_units([line_text], position).character


def client_span(line_text: str, start: int, end: int, codec: PositionCodec) -> Tuple[int, int]:
    """Convert string indices on ``line_text`` back into client columns."""

    span = Range(start=Position(line=0, character=start), end=Position(line=0, character=end))
    converted = codec.range_to_client_units([line_text], span)
    return converted.start.character, converted.end.character


def word_bounds(line_text: str, index: int) -> Tuple[int, int]:
    """Half-open bounds of the word-character run touching ``index``."""

    index = min(max(index, 0), len(line_text))
    start = index
    while start > 0 and is_word_char(line_text[start - 1]):
        start -= 1
    end = index
    while end < len(line_text) and is_word_char(line_text[end]):
        end += 1
    return start, end


def token_bounds(line_text: str, index: int) -> Tuple[int, int]:
    """Word bounds widened to a pair of enclosing double quotes, if any."""

    start, end = word_bounds(line_text, index)
    if start == end:
        return start, end
    if start > 0 and end < len(line_text) and line_text[start - 1] == _QUOTE and line_text[end] == _QUOTE:
        return start - 1, end + 1
    return start, end


def lookup_key(token: str) -> str:
    if token.startswith(_QUOTE):
        token = token[1:]
    if token.endswith(_QUOTE):
        token = token[:-1]
    return token


def resolve(
    text: str,
    line: int,
    character: int,
    dictionary: Dictionary,
    codec: Optional[PositionCodec] = None,
) -> Optional[HoverMatch]:
    """Find the dictionary entry for the token at ``line``/``character``.

    Returns ``None`` for an out-of-range line, an empty word or a dictionary
    miss. The returned range covers the token as written, quotes included,
    even though the quotes are not part of the key.

    ``codec`` is the server's negotiated position codec; UTF-16 when omitted.
    """

    if codec is None:
        codec = _DEFAULT_CODEC
    line_text = line_at(text, line)
    start, end = token_bounds(line_text, column_to_index(line_text, character, codec))
    key = lookup_key(line_text[start:end])
    if not key:
        return None
    payload = dictionary.lookup(key)
    if payload is None:
        return None
    client_start, client_end = client_span(line_text, start, end, codec)
    return HoverMatch(payload=payload, line=line, start=client_start, end=client_end)


__all__ = [
    "is_word_char",
    "line_at",
    "column_to_index",
    "client_span",
    "word_bounds",
    "token_bounds",
    "lookup_key",
    "resolve",
]
