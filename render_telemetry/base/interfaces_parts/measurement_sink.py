"""MeasurementSink Protocol (single-class module).

The one-method contract every telemetry collector satisfies. Sinks are
invoked synchronously once per sample; failures propagate to the caller.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MeasurementSink(Protocol):
    """Collector accepting named numeric measurements."""

    def add(self, name: str, value: float) -> None:
        """Record one measurement ``value`` under metric ``name``."""
        ...


__all__ = ["MeasurementSink"]
