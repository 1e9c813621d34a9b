"""Tests for server configuration resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from alloy_hover.config import (
    DEFAULT_DOCS_PATH,
    DOCS_ENV_VAR,
    LOG_FILE_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    ServerConfig,
)
from alloy_hover.errors import ConfigError


def test_defaults_without_environment() -> None:
    config = ServerConfig.from_env({})
    assert config.docs_path == DEFAULT_DOCS_PATH == Path("docs/alloy-hover.toml")
    assert config.log_level == "info"
    assert config.log_file is None


def test_environment_overrides_defaults() -> None:
    config = ServerConfig.from_env(
        {
            DOCS_ENV_VAR: "/etc/alloy/hover.toml",
            LOG_LEVEL_ENV_VAR: "DEBUG",
            LOG_FILE_ENV_VAR: "/tmp/alloy-hover.log",
        }
    )
    assert config.docs_path == Path("/etc/alloy/hover.toml")
    assert config.log_level == "debug"
    assert config.log_file == Path("/tmp/alloy-hover.log")


def test_explicit_arguments_win_over_environment() -> None:
    config = ServerConfig.from_env(
        {DOCS_ENV_VAR: "from-env.toml", LOG_LEVEL_ENV_VAR: "error"},
        docs="from-cli.toml",
        log_level="warn",
    )
    assert config.docs_path == Path("from-cli.toml")
    assert config.log_level == "warn"


def test_empty_environment_value_falls_back_to_default() -> None:
    config = ServerConfig.from_env({DOCS_ENV_VAR: ""})
    assert config.docs_path == DEFAULT_DOCS_PATH


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DOCS_ENV_VAR, "custom.toml")
    assert ServerConfig.from_env().docs_path == Path("custom.toml")


def test_relative_docs_path_resolves_against_cwd(tmp_path: Path) -> None:
    config = ServerConfig.from_env({})
    assert config.resolved_docs_path(tmp_path) == tmp_path / "docs" / "alloy-hover.toml"


def test_absolute_docs_path_is_kept(tmp_path: Path) -> None:
    target = tmp_path / "hover.toml"
    config = ServerConfig(docs_path=target)
    assert config.resolved_docs_path(Path("/elsewhere")) == target


def test_load_dictionary_from_default_location(tmp_path: Path) -> None:
    docs_dir = tmp_path / "docs"
    docs_dir.mkdir()
    (docs_dir / "alloy-hover.toml").write_text('foo = "Foo docs"\n', encoding="utf-8")
    dictionary = ServerConfig.from_env({}).load_dictionary(tmp_path)
    assert dictionary.lookup("foo") == "Foo docs"


def test_load_dictionary_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ServerConfig.from_env({}).load_dictionary(tmp_path)
