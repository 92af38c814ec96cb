"""In-memory measurement collector.

Re-exports the one-class-per-file implementations from
``metrics/collector_parts`` under a single import path.
"""

from .collector_parts import InMemoryMeasurementCollector, MeasurementStatsSnapshot

__all__ = [
    "InMemoryMeasurementCollector",
    "MeasurementStatsSnapshot",
]
