"""Render delay tracking for continuously updating charts.

For every render, the tracker works out which timestamps of the displayed time
field have not been observed before and reports ``now - timestamp`` for each
of them as a ``DataRenderDelay`` measurement.

Frames are either replaced between renders or mutated in place, so the
previous snapshot alone cannot tell which points are new. The tracker keeps a
baseline count per time-sequence identity:

- unseen identity: everything already present in ``previous`` is treated as
  history, so the first sight of a backlog does not produce a burst of
  measurements;
- known identity: points past the stored baseline are new;
- known identity that shrank: the baseline is re-based to the current length
  and nothing is emitted for that render.

The baseline is stored after emission on every call, including calls that
emit nothing.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from ..base.clock import system_clock_ms
from ..base.interfaces import Clock, MeasurementSink
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Snapshot, find_time_field
from ..config import TrackerSettings, apply_logging, get_tracker_settings
from ..metrics.measurement_name import MeasurementName
from ..metrics.sinks import get_default_sink
from .baseline_cache import BaselineCache, get_process_cache, sequence_identity
from .delay_sample import DelaySample


class DataRenderDelayTracker:
    """Emit render delay samples for newly displayed time points.

    Args:
        sink: Collector receiving ``add(name, delay)`` calls. When ``None``
            the process-wide default sink is looked up on each emission.
        clock: Epoch-millisecond clock, read once per render.
        cache: Baseline cache; defaults to the process-wide cache.
        settings: Tracker settings; defaults to built-in defaults.
        logger: Logger for debug events.
    """

    metric_name = MeasurementName.DATA_RENDER_DELAY.value

    def __init__(
        self,
        sink: Optional[MeasurementSink] = None,
        *,
        clock: Optional[Clock] = None,
        cache: Optional[BaselineCache] = None,
        settings: Optional[TrackerSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._sink = sink
        self._clock = clock or system_clock_ms
        self._cache = cache if cache is not None else get_process_cache()
        self._settings = settings if settings is not None else TrackerSettings()
        self._logger = logger or get_logger("render_telemetry.measurement")
        self._ctx = LogContext(metric=self.metric_name)

    @property
    def cache(self) -> BaselineCache:
        return self._cache

    def record_render(self, current: Snapshot, previous: Snapshot = None) -> List[DelaySample]:
        """Report delays for points of ``current`` not observed before.

        Args:
            current: Snapshot about to be displayed (frame, sequence of
                frames, or ``None``).
            previous: Snapshot displayed immediately before; may be the very
                same object as ``current``.

        Returns:
            The emitted samples, oldest point first. Empty when ``current``
            has no time field, nothing is new, or the sequence shrank.
        """
        if not self._settings.enabled:
            return []
        time_field = find_time_field(current)
        if time_field is None:
            return []

        times = time_field.values
        length = len(times)
        key = sequence_identity(times)

        baseline = self._cache.get(key, times)
        if baseline is None:
            prev_field = find_time_field(previous)
            baseline = len(prev_field.values) if prev_field is not None else 0

        if length < baseline:
            log_event(
                self._logger,
                "render_delay.baseline_reset",
                self._ctx,
                level=logging.DEBUG,
                identity=key,
                baseline=baseline,
                length=length,
            )
            self._cache.set(key, length, times)
            return []

        samples: List[DelaySample] = []
        if length > baseline:
            now = self._clock()
            sink = self._sink if self._sink is not None else get_default_sink()
            for i in range(baseline, length):
                timestamp = times[i]
                delay = now - timestamp
                sink.add(self.metric_name, delay)
                samples.append(DelaySample(timestamp=timestamp, delay=delay))
            log_event(
                self._logger,
                "render_delay.measured",
                self._ctx,
                level=logging.DEBUG,
                identity=key,
                count=len(samples),
                baseline=baseline,
                length=length,
            )

        self._cache.set(key, length, times)
        return samples

    def reset(self) -> None:
        """Forget every baseline held by this tracker's cache."""
        self._cache.clear()


_DEFAULT_TRACKER: DataRenderDelayTracker | None = None


def get_default_tracker() -> DataRenderDelayTracker:
    """Return the process-wide tracker used by :func:`measure_data_render_delay`.

    It reports to the process-wide default sink and reads its settings once,
    on first use. The configured ``log_level`` is applied to the package
    logger at that point.
    """
    global _DEFAULT_TRACKER
    if _DEFAULT_TRACKER is None:
        settings = get_tracker_settings()
        apply_logging(settings)
        _DEFAULT_TRACKER = DataRenderDelayTracker(settings=settings)
    return _DEFAULT_TRACKER


def measure_data_render_delay(current: Snapshot, previous: Snapshot = None) -> List[DelaySample]:
    """Record one render of ``current`` (shown after ``previous``) with the default tracker."""
    return get_default_tracker().record_render(current, previous)


def reset_render_delay_cache() -> None:
    """Clear the process-wide baselines and rebuild the default tracker on next use."""
    global _DEFAULT_TRACKER
    get_process_cache().clear()
    _DEFAULT_TRACKER = None


__all__ = [
    "DataRenderDelayTracker",
    "get_default_tracker",
    "measure_data_render_delay",
    "reset_render_delay_cache",
]
