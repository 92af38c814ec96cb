"""Pytest configuration for the render telemetry test suite.

Every test starts from clean process-wide state: empty baseline cache, no
default tracker or sink, no cached settings file, and no
``RENDER_TELEMETRY_*`` environment overrides.
"""

from __future__ import annotations

import os
from typing import Callable, Iterator, List, Tuple

import pytest

from render_telemetry.base.clock import ManualClock
from render_telemetry.base.logging import configure_logger
from render_telemetry.base.models import DataFrame, to_data_frame
from render_telemetry.config import reset_settings_cache
from render_telemetry.measurement import reset_render_delay_cache
from render_telemetry.metrics import set_default_sink

CURRENT_TIME = 1000


class RecordingSink:
    """Sink capturing every ``add`` call in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, float]] = []

    def add(self, name: str, value: float) -> None:
        self.calls.append((name, value))

    @property
    def values(self) -> List[float]:
        return [v for _, v in self.calls]


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("RENDER_TELEMETRY_"):
            monkeypatch.delenv(key, raising=False)
    reset_render_delay_cache()
    reset_settings_cache()
    set_default_sink(None)
    configure_logger(level="INFO", file_path=None)
    yield
    reset_render_delay_cache()
    reset_settings_cache()
    set_default_sink(None)
    configure_logger(level="INFO", file_path=None)


@pytest.fixture()
def manual_clock() -> ManualClock:
    """Clock frozen at ``CURRENT_TIME`` milliseconds."""
    return ManualClock(CURRENT_TIME)


@pytest.fixture()
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def frame_with() -> Callable[[List[float]], List[DataFrame]]:
    """Factory building panel data (a one-frame list) around a time value list.

    The list is wrapped, not copied, so appending to it mutates the frame.
    """

    def _build(time_values: List[float]) -> List[DataFrame]:
        return [to_data_frame({"fields": [{"name": "time", "type": "time", "values": time_values}]})]

    return _build
