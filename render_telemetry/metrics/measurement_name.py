"""Canonical measurement names reported to performance collectors."""

from __future__ import annotations

from enum import Enum


class MeasurementName(str, Enum):
    """Stable metric names; values are part of the collector contract."""

    DATA_RENDER_DELAY = "DataRenderDelay"


__all__ = ["MeasurementName"]
