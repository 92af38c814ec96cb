"""Unified configuration layer for render telemetry.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional settings file pointed to by ``RENDER_TELEMETRY_CONFIG_FILE``
       (JSON first, YAML otherwise), ``tracker`` section
    3. Environment variables ``RENDER_TELEMETRY_ENABLED``,
       ``RENDER_TELEMETRY_LOG_LEVEL``, ``RENDER_TELEMETRY_SINK``
    4. In-code overrides passed to :func:`get_tracker_settings`

Settings file example:

```
tracker:
  enabled: true
  sink: memory
  log_level: debug
```

The parsed file is cached for the process; :func:`reset_settings_cache`
drops the cache (tests, config reloads).
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..base.errors import ErrorCode, TelemetryError
from ..base.logging import configure_logger
from .defaults import CONFIG_FILE_ENV, CONFIG_SECTION, ENV_FIELD_MAP, ENV_PREFIX
from .settings import SinkKind, TrackerSettings

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TelemetryError(ErrorCode.CONFIG, f"cannot read settings file {path}: {exc}", source="config", raw=exc) from exc
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise TelemetryError(ErrorCode.CONFIG, f"malformed settings file {path}", source="config", raw=exc) from exc
    if not isinstance(data, dict):
        raise TelemetryError(ErrorCode.CONFIG, f"settings file {path} must contain a mapping", source="config")
    _FILE_CACHE = data
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{ENV_PREFIX}{suffix}")
        if val is not None and val.strip():
            out[field] = val.strip()
    return out


def get_tracker_settings(overrides: Optional[Dict[str, Any]] = None) -> TrackerSettings:
    """Return merged tracker settings.

    Merge order (later wins): defaults -> settings file -> env vars -> overrides.

    Raises:
        TelemetryError: ``CONFIG`` for an unreadable or malformed settings
            file, ``VALIDATION`` when a merged value fails validation.
    """
    cfg: Dict[str, Any] = {}

    section = _load_external_config().get(CONFIG_SECTION)
    if isinstance(section, dict):
        cfg |= section

    cfg |= _env_overrides()

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    try:
        return TrackerSettings(**cfg)
    except ValidationError as exc:
        raise TelemetryError(ErrorCode.VALIDATION, f"invalid tracker settings: {exc}", source="config", raw=exc) from exc


def reset_settings_cache() -> None:
    """Forget the parsed settings file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def apply_logging(settings: TrackerSettings) -> logging.Logger:
    """Apply ``settings.log_level`` to the shared package logger."""
    return configure_logger(level=settings.log_level)


__all__ = [
    "SinkKind",
    "TrackerSettings",
    "apply_logging",
    "get_tracker_settings",
    "reset_settings_cache",
]
