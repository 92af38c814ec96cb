"""Stable import surface for render telemetry protocols."""

from .interfaces_parts import Clock, FieldLike, FrameLike, MeasurementSink

__all__ = ["Clock", "FieldLike", "FrameLike", "MeasurementSink"]
