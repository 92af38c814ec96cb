"""
Render telemetry base package

Provider-independent building blocks shared by the tracker, sinks and
configuration:
- Errors: normalized error taxonomy
- Logging: structured JSON logging helpers
- Interfaces: sink, clock and frame protocols
- Models: frames, fields and identity-carrying value vectors
- Clock: system and manual clocks
"""

from .errors import ErrorCode, TelemetryError
from .logging import LogContext, configure_logger, get_logger, log_event
from .interfaces import Clock, FieldLike, FrameLike, MeasurementSink
from .models import ArrayVector, DataFrame, Field, FieldType, find_time_field, to_data_frame
from .clock import ManualClock, system_clock_ms

__all__ = [
    "ErrorCode",
    "TelemetryError",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "Clock",
    "FieldLike",
    "FrameLike",
    "MeasurementSink",
    "ArrayVector",
    "DataFrame",
    "Field",
    "FieldType",
    "find_time_field",
    "to_data_frame",
    "ManualClock",
    "system_clock_ms",
]
