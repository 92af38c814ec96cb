"""Clock Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Zero-argument callable returning the current time in epoch milliseconds."""

    def __call__(self) -> float:
        ...


__all__ = ["Clock"]
