"""Measurement names, sinks and the in-memory collector.

Concrete exporters for external systems can be added as further
``MeasurementSink`` implementations without touching the tracker.
"""
from __future__ import annotations

from .measurement_name import MeasurementName
from .collector import InMemoryMeasurementCollector, MeasurementStatsSnapshot
from .sinks import (
    LoggingMeasurementSink,
    NoOpMeasurementSink,
    build_sink,
    get_default_sink,
    set_default_sink,
)

__all__ = [
    "MeasurementName",
    "InMemoryMeasurementCollector",
    "MeasurementStatsSnapshot",
    "LoggingMeasurementSink",
    "NoOpMeasurementSink",
    "build_sink",
    "get_default_sink",
    "set_default_sink",
]
