"""Interfaces (Protocols) split into single-class modules.

``render_telemetry.base.interfaces`` re-exports these as the stable API.
"""

from .measurement_sink import MeasurementSink
from .clock import Clock
from .frame_like import FieldLike, FrameLike

__all__ = [
    "MeasurementSink",
    "Clock",
    "FieldLike",
    "FrameLike",
]
