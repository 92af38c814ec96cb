"""Thread-safe in-memory aggregation sink.

Collects measurements per metric name (count, total, min, max, last) and
exposes immutable snapshots. Negative values are aggregated like any other:
a negative render delay signals clock skew and must stay visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Dict, List, Optional

from ...base.clock import system_clock_ms
from ...base.errors import ErrorCode, TelemetryError
from .measurement_stats_snapshot import MeasurementStatsSnapshot


@dataclass
class _Aggregate:
    count: int = 0
    total: float = 0.0
    min: Optional[float] = None
    max: Optional[float] = None
    last: Optional[float] = None

    def add(self, value: float) -> None:
        if self.min is None or value < self.min:
            self.min = value
        if self.max is None or value > self.max:
            self.max = value
        self.count += 1
        self.total += value
        self.last = value


class InMemoryMeasurementCollector:
    """Measurement sink aggregating values per metric name.

    Safe to read (``snapshot``) from a thread other than the one recording.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._aggregates: Dict[str, _Aggregate] = {}

    def add(self, name: str, value: float) -> None:
        """Record ``value`` under metric ``name``.

        Raises:
            TelemetryError: ``VALIDATION`` for an empty name or a value that
                is not a real number.
        """
        if not name:
            raise TelemetryError(ErrorCode.VALIDATION, "measurement name must not be empty", source="metrics")
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise TelemetryError(
                ErrorCode.VALIDATION,
                f"measurement {name!r} value {value!r} is not numeric",
                source="metrics",
                raw=exc,
            ) from exc
        key = str(getattr(name, "value", name))
        with self._lock:
            self._aggregates.setdefault(key, _Aggregate()).add(number)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._aggregates)

    def snapshot(self, name: str) -> MeasurementStatsSnapshot:
        """Return the aggregate for ``name`` (zero counts when never recorded)."""
        key = str(getattr(name, "value", name))
        with self._lock:
            return self._snapshot_locked(key, self._aggregates.get(key) or _Aggregate())

    def snapshot_all(self, reset: bool = False) -> Dict[str, MeasurementStatsSnapshot]:
        """Return aggregates for every recorded name.

        Args:
            reset: If True, drop all aggregates after taking the snapshot.
        """
        with self._lock:
            out = {key: self._snapshot_locked(key, agg) for key, agg in self._aggregates.items()}
            if reset:
                self._aggregates.clear()
            return out

    def clear(self) -> None:
        with self._lock:
            self._aggregates.clear()

    @staticmethod
    def _snapshot_locked(key: str, agg: _Aggregate) -> MeasurementStatsSnapshot:
        return MeasurementStatsSnapshot(
            name=key,
            count=agg.count,
            total=agg.total,
            min=agg.min,
            max=agg.max,
            avg=(agg.total / agg.count) if agg.count else None,
            last=agg.last,
            generated_at_ms=system_clock_ms(),
        )


__all__ = ["InMemoryMeasurementCollector"]
