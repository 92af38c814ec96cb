"""Wall-clock sources in epoch milliseconds.

``system_clock_ms`` is the production default. ``ManualClock`` is a settable
stand-in for deterministic tests and replays.
"""
from __future__ import annotations

import time


def system_clock_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class ManualClock:
    """Clock whose reading only changes when told to."""

    def __init__(self, now_ms: float = 0) -> None:
        self._now_ms = now_ms

    def __call__(self) -> float:
        return self._now_ms

    def set(self, now_ms: float) -> None:
        self._now_ms = now_ms

    def advance(self, delta_ms: float) -> float:
        """Move the clock forward by ``delta_ms`` and return the new reading."""
        self._now_ms += delta_ms
        return self._now_ms


__all__ = ["system_clock_ms", "ManualClock"]
