# src/geoloc/config/settings.py
"""
Package settings (Pydantic).

Settings are loaded from `src/geoloc/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOLOC_CONFIG_PATH` (replaces the packaged defaults)
- environment variables (`GEOLOC_LOG_LEVEL`, `GEOLOC_SETTINGS_PATH`, `GEOLOC_GEOCODING_URL`)

These are tuning knobs for the library itself. The user's API keys and default
location live in the settings file handled by `geoloc.storage.settings_store`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any
from geoloc.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geoloc.config`."""
    text = resources.files("geoloc.config").joinpath(filename).read_text(encoding="utf-8")
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
    name: str = "geoloc"
    http_timeout_seconds: float = Field(15, gt=0)
    log_level: str = "INFO"
    user_agent: str = "geoloc/0.1.0 (+https://local)"


class GeocodingSettings(BaseModel):
    base_url: str = "https://api.openweathermap.org/geo/1.0/direct"


class StoreSettings(BaseModel):
    path: str = "settings/uv.json"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    geocoding: GeocodingSettings = Field(default_factory=GeocodingSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)

    log_level = os.getenv("GEOLOC_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    settings_path = os.getenv("GEOLOC_SETTINGS_PATH")
    if settings_path:
        data.setdefault("store", {})["path"] = settings_path

    geocoding_url = os.getenv("GEOLOC_GEOCODING_URL")
    if geocoding_url:
        data.setdefault("geocoding", {})["base_url"] = geocoding_url

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOLOC_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
