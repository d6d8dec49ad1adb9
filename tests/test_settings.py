"""Configuration and logging setup tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.logging_setup import LOGGER_NAME, configure_logging
from core.settings import (
    CONFIG_ENV_VAR,
    LoggingSettings,
    load_effective_config,
    load_settings,
    load_yaml,
    merge_dicts,
)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_config_yields_defaults(tmp_path: Path) -> None:
    settings = load_settings(root=tmp_path, environ={})
    assert settings.runtime == "nodejs"
    assert settings.logging.enabled is False
    assert settings.logging.level == "INFO"


def test_load_yaml_rejects_non_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.yaml", "- a\n- b\n")
    with pytest.raises(ValueError):
        load_yaml(path)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts(
        {"runtime": "nodejs", "logging": {"enabled": False, "level": "INFO"}},
        {"logging": {"enabled": True}},
    )
    assert merged == {"runtime": "nodejs", "logging": {"enabled": True, "level": "INFO"}}


def test_override_file_from_environment(tmp_path: Path) -> None:
    _write(tmp_path / "config" / "default.yaml", "runtime: nodejs\nlogging:\n  level: INFO\n")
    override = _write(tmp_path / "local.yaml", "runtime: jvm\nlogging:\n  level: debug\n")

    config = load_effective_config(root=tmp_path, environ={CONFIG_ENV_VAR: str(override)})
    assert config["runtime"] == "jvm"

    settings = load_settings(root=tmp_path, environ={CONFIG_ENV_VAR: str(override)})
    assert settings.runtime == "jvm"
    assert settings.logging.level == "DEBUG"


def test_invalid_logging_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingSettings(level="chatty")


def test_disabled_logging_installs_null_handler() -> None:
    logger = configure_logging(LoggingSettings())
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)
    assert logger.propagate is False


def test_enabled_logging_writes_to_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "probe.log"
    logger = configure_logging(LoggingSettings(enabled=True, level="DEBUG", path=log_path))
    try:
        logging.getLogger("probe.dispatcher").info("dispatched %s", "existing")
        for handler in logger.handlers:
            handler.flush()
        assert "dispatched existing" in log_path.read_text(encoding="utf-8")
    finally:
        configure_logging(LoggingSettings())
