"""render_telemetry package

Render latency telemetry for continuously updating charts.

Purpose:
    Measure how long each data point takes from production (its timestamp)
    to its first render, and report the delay as a ``DataRenderDelay``
    measurement to a pluggable collector.

Public API (re-exported):
    - Version: ``__version__``
    - Tracker: :class:`DataRenderDelayTracker`, :func:`measure_data_render_delay`,
      :func:`reset_render_delay_cache`, :class:`DelaySample`
    - Frames: :class:`DataFrame`, :class:`Field`, :class:`FieldType`,
      :class:`ArrayVector`, :func:`to_data_frame`
    - Sinks: :class:`InMemoryMeasurementCollector`, :class:`LoggingMeasurementSink`,
      :class:`NoOpMeasurementSink`, :func:`get_default_sink`, :func:`set_default_sink`
    - Settings: :class:`TrackerSettings`, :func:`get_tracker_settings`
    - Errors: :class:`TelemetryError`, :class:`ErrorCode`

Example:
    >>> from render_telemetry import DataRenderDelayTracker, InMemoryMeasurementCollector, to_data_frame
    >>> collector = InMemoryMeasurementCollector()
    >>> tracker = DataRenderDelayTracker(collector)
    >>> times = [100, 200, 300]
    >>> frame = to_data_frame({"fields": [{"name": "time", "type": "time", "values": times}]})
    >>> tracker.record_render(frame, frame)
    []
"""

from .base.errors import ErrorCode, TelemetryError
from .base.clock import ManualClock, system_clock_ms
from .base.interfaces import MeasurementSink
from .base.models import ArrayVector, DataFrame, Field, FieldType, find_time_field, to_data_frame
from .config import TrackerSettings, get_tracker_settings
from .metrics import (
    InMemoryMeasurementCollector,
    LoggingMeasurementSink,
    MeasurementName,
    MeasurementStatsSnapshot,
    NoOpMeasurementSink,
    get_default_sink,
    set_default_sink,
)
from .measurement import (
    DataRenderDelayTracker,
    DelaySample,
    measure_data_render_delay,
    reset_render_delay_cache,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "TelemetryError",
    "ManualClock",
    "system_clock_ms",
    "MeasurementSink",
    "ArrayVector",
    "DataFrame",
    "Field",
    "FieldType",
    "find_time_field",
    "to_data_frame",
    "TrackerSettings",
    "get_tracker_settings",
    "InMemoryMeasurementCollector",
    "LoggingMeasurementSink",
    "MeasurementName",
    "MeasurementStatsSnapshot",
    "NoOpMeasurementSink",
    "get_default_sink",
    "set_default_sink",
    "DataRenderDelayTracker",
    "DelaySample",
    "measure_data_render_delay",
    "reset_render_delay_cache",
]
