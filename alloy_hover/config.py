"""Startup configuration for the hover server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from .dictionary import Dictionary

DOCS_ENV_VAR = "ALLOY_HOVER_DOCS"
LOG_LEVEL_ENV_VAR = "ALLOY_HOVER_LOG_LEVEL"
LOG_FILE_ENV_VAR = "ALLOY_HOVER_LOG_FILE"

DEFAULT_DOCS_PATH = Path("docs") / "alloy-hover.toml"
DEFAULT_LOG_LEVEL = "info"


@dataclass
class ServerConfig:
    """Resolved server settings.

    Explicit arguments win over environment variables, which win over the
    built-in defaults.
    """

    docs_path: Path = DEFAULT_DOCS_PATH
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        docs: Optional[Union[str, Path]] = None,
        log_level: Optional[str] = None,
        log_file: Optional[Union[str, Path]] = None,
    ) -> "ServerConfig":
        env = os.environ if environ is None else environ
        docs_raw = docs or env.get(DOCS_ENV_VAR) or DEFAULT_DOCS_PATH
        level = log_level or env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
        file_raw = log_file or env.get(LOG_FILE_ENV_VAR) or None
        return cls(
            docs_path=Path(docs_raw),
            log_level=str(level).lower(),
            log_file=Path(file_raw) if file_raw else None,
        )

    def resolved_docs_path(self, cwd: Optional[Path] = None) -> Path:
        if self.docs_path.is_absolute():
            return self.docs_path
        return (cwd or Path.cwd()) / self.docs_path

    def load_dictionary(self, cwd: Optional[Path] = None) -> Dictionary:
        return Dictionary.load(self.resolved_docs_path(cwd))


__all__ = [
    "DOCS_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "LOG_FILE_ENV_VAR",
    "DEFAULT_DOCS_PATH",
    "DEFAULT_LOG_LEVEL",
    "ServerConfig",
]
