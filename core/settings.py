"""Configuration loading for the probe applications."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "PROBE_APPS_CONFIG"
DEFAULT_ROOT = Path(__file__).resolve().parents[1]


class LoggingSettings(BaseModel):
    """Diagnostic logging; off by default so the streams carry only protocol lines."""

    enabled: bool = False
    level: str = "INFO"
    path: Path | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level


class ProbeSettings(BaseModel):
    """Effective settings for one probe invocation."""

    runtime: str = "nodejs"
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(
    root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Merge config/default.yaml with the file named by PROBE_APPS_CONFIG."""
    environ = os.environ if environ is None else environ
    config_dir = (root or DEFAULT_ROOT) / "config"
    merged = load_yaml(config_dir / "default.yaml")
    override_path = environ.get(CONFIG_ENV_VAR)
    if override_path:
        merged = merge_dicts(merged, load_yaml(Path(override_path)))
    return merged


def load_settings(
    root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProbeSettings:
    """Load and validate settings."""
    return ProbeSettings.model_validate(load_effective_config(root, environ))
