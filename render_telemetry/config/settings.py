"""Typed tracker settings.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and coercion of env/file strings
  (``"false"``, ``"0"``, ``"off"`` become ``False``).
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from .defaults import DEFAULT_ENABLED, DEFAULT_LOG_LEVEL, DEFAULT_SINK

_LEVELS = ("DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL")

SinkKind = Literal["noop", "logging", "memory"]


class TrackerSettings(BaseModel):
    """Runtime options for the render delay tracker.

    Attributes
    ----------
    enabled:
        When ``False`` the tracker neither emits samples nor touches its
        baseline cache.
    log_level:
        Level applied to the package logger by :func:`apply_logging`.
    sink:
        Kind of process-wide default sink: ``"noop"``, ``"logging"`` or
        ``"memory"``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = DEFAULT_ENABLED
    log_level: str = DEFAULT_LOG_LEVEL
    sink: SinkKind = DEFAULT_SINK

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("sink", mode="before")
    @classmethod
    def _normalize_sink(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


__all__ = ["TrackerSettings", "SinkKind"]
