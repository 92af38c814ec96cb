"""Render delay measurement: baselines, samples and the delay tracker."""

from .baseline_cache import BaselineCache, get_process_cache, sequence_identity
from .delay_sample import DelaySample
from .delay_tracker import (
    DataRenderDelayTracker,
    get_default_tracker,
    measure_data_render_delay,
    reset_render_delay_cache,
)

__all__ = [
    "BaselineCache",
    "get_process_cache",
    "sequence_identity",
    "DelaySample",
    "DataRenderDelayTracker",
    "get_default_tracker",
    "measure_data_render_delay",
    "reset_render_delay_cache",
]
