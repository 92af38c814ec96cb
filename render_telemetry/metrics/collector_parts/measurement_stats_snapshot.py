"""Measurement statistics snapshot dataclass.

Immutable aggregate of every value recorded under one metric name, designed
for serialization and logging.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MeasurementStatsSnapshot:
    """Immutable point-in-time aggregate for a single metric.

    Attributes:
        name: Metric name.
        count: Number of recorded values.
        total: Sum of recorded values.
        min: Smallest value or None if no samples.
        max: Largest value or None if no samples.
        avg: Arithmetic mean or None if no samples.
        last: Most recently recorded value or None if no samples.
        generated_at_ms: Wall-clock time the snapshot was taken.
    """

    name: str
    count: int
    total: float
    min: Optional[float]
    max: Optional[float]
    avg: Optional[float]
    last: Optional[float]
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["MeasurementStatsSnapshot"]
