"""Measurement sinks and the process-wide default sink.

Purpose
-------
- Provide ready-made implementations of the one-method ``add(name, value)``
  collector contract so the tracker can run without an external telemetry
  backend.

Design
------
- ``NoOpMeasurementSink`` ignores samples (safe baseline).
- ``LoggingMeasurementSink`` writes one structured ``measurement`` event per
  sample through the package logger.
- ``get_default_sink()`` returns a process-wide sink, lazily built from the
  ``sink`` setting; ``set_default_sink`` replaces it (``None`` restores lazy
  construction).

Failure Modes
-------------
- Sinks do not retry. Exceptions raised by a sink propagate to the caller.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..base.errors import ErrorCode, TelemetryError
from ..base.interfaces import MeasurementSink
from ..base.logging import LogContext, get_logger, log_event
from ..config import apply_logging, get_tracker_settings
from .collector import InMemoryMeasurementCollector


class NoOpMeasurementSink:
    """Sink that accepts measurements and does nothing."""

    def add(self, name: str, value: float) -> None:  # noqa: D401 - trivial
        return


class LoggingMeasurementSink:
    """Sink that logs each measurement as a structured event."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._logger = logger or get_logger("render_telemetry.metrics")
        self._level = level

    def add(self, name: str, value: float) -> None:
        metric = str(getattr(name, "value", name))
        log_event(self._logger, "measurement", LogContext(metric=metric), level=self._level, value=value)


def build_sink(kind: str) -> MeasurementSink:
    """Return a new sink for a configured ``kind`` (noop, logging, memory)."""
    if kind == "noop":
        return NoOpMeasurementSink()
    if kind == "logging":
        return LoggingMeasurementSink()
    if kind == "memory":
        return InMemoryMeasurementCollector()
    raise TelemetryError(ErrorCode.CONFIG, f"unknown sink kind {kind!r}", source="metrics")


_DEFAULT_SINK: MeasurementSink | None = None


def get_default_sink() -> MeasurementSink:
    """Return the process-wide default sink, building it on first use.

    Building the sink also applies the configured ``log_level``.
    """
    global _DEFAULT_SINK
    if _DEFAULT_SINK is None:
        settings = get_tracker_settings()
        apply_logging(settings)
        _DEFAULT_SINK = build_sink(settings.sink)
    return _DEFAULT_SINK


def set_default_sink(sink: MeasurementSink | None) -> None:
    """Install ``sink`` as the process-wide default (``None`` resets it)."""
    global _DEFAULT_SINK
    _DEFAULT_SINK = sink


__all__ = [
    "NoOpMeasurementSink",
    "LoggingMeasurementSink",
    "build_sink",
    "get_default_sink",
    "set_default_sink",
]
