# src/geocenter/config/settings.py
"""
Library settings (Pydantic).

Settings are loaded from `src/geocenter/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOCENTER_CONFIG_PATH` (replaces the packaged defaults)
- environment variables (`GEOCENTER_LOG_LEVEL`, `GEOCENTER_UNITS`)

The `GeoDistance` constructor never reads settings; use `geocenter.engine.build_engine`
to get an engine configured from them.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from geocenter.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geocenter.config`."""
    text = resources.files("geocenter.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "GeoCenter"
    log_level: str = "INFO"


class EngineSettings(BaseModel):
    units: str = "miles"

    @field_validator("units")
    @classmethod
    def _check_units(cls, value: str) -> str:
        value = value.strip()
        if not value or value[0].upper() not in ("M", "K"):
            raise ValueError("engine.units must start with 'm' (miles) or 'k' (kilometers)")
        return value


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay the whitelisted environment variables onto the raw settings payload."""
    data = dict(data)
    log_level = os.getenv("GEOCENTER_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    units = os.getenv("GEOCENTER_UNITS")
    if units:
        data.setdefault("engine", {})["units"] = units

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOCENTER_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
