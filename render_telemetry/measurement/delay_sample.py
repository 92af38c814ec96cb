"""Render delay sample value object."""

from __future__ import annotations

from dataclasses import dataclass

from ..metrics.measurement_name import MeasurementName


@dataclass(frozen=True)
class DelaySample:
    """One emitted render delay measurement.

    Attributes:
        timestamp: Epoch-millisecond timestamp of the newly rendered point.
        delay: Clock reading minus ``timestamp``. Not clamped; negative values
            indicate clock skew or out-of-order timestamps.
        name: Metric name the sample was reported under.
    """

    timestamp: float
    delay: float
    name: str = MeasurementName.DATA_RENDER_DELAY.value


__all__ = ["DelaySample"]
