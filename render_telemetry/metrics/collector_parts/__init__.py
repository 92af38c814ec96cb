"""One-class-per-file parts for the in-memory measurement collector."""

from .measurement_stats_snapshot import MeasurementStatsSnapshot
from .in_memory_collector import InMemoryMeasurementCollector

__all__ = [
    "MeasurementStatsSnapshot",
    "InMemoryMeasurementCollector",
]
