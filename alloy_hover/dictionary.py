"""The hover dictionary: documentation snippets keyed by the token they describe."""

from __future__ import annotations

import tomllib
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .errors import ConfigError
from .observability.logging import get_logger

logger = get_logger("alloy_hover.dictionary")


class Dictionary:
    """Immutable mapping from a lookup key to its Markdown payload.

    Keys are matched literally: no case folding, prefix or fuzzy matching.
    """

    __slots__ = ("_entries", "source")

    def __init__(self, entries: Mapping[str, str], source: Optional[Path] = None) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))
        self.source = source

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def load(cls, path: Union[str, Path]) -> "Dictionary":
        """Read and validate a flat ``key = "markdown"`` TOML file.

        Raises:
            ConfigError: if the file is missing or unreadable, is not valid
                TOML, or holds anything other than string values.
        """

        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(
                f"Cannot read hover dictionary: {exc}",
                path=str(source),
                hint="Set ALLOY_HOVER_DOCS or pass --docs with the path to alloy-hover.toml",
            ) from exc
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(
                f"Hover dictionary is not valid TOML: {exc}",
                path=str(source),
            ) from exc
        dictionary = cls.from_mapping(data, source=source)
        logger.debug("Loaded %d hover entries from %s", len(dictionary), source)
        return dictionary

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object], *, source: Optional[Path] = None) -> "Dictionary":
        entries: Dict[str, str] = {}
        for key, value in mapping.items():
            if not isinstance(key, str):
                raise ConfigError(
                    f"Hover dictionary key {key!r} is not a string",
                    path=str(source) if source else None,
                )
            if not isinstance(value, str):
                raise ConfigError(
                    f"Hover dictionary entry '{key}' must be a string, got {type(value).__name__}",
                    path=str(source) if source else None,
                    hint='Quote dotted keys, e.g. "alloy.cast" = "..."',
                )
            entries[key] = value
        return cls(entries, source=source)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def lookup(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._entries)} entries, source={self.source!r})"


__all__ = ["Dictionary"]
