"""
Structured telemetry error exception type.

Raised for programming and configuration mistakes only (malformed frames,
unreadable settings). The render path itself never raises on its own account.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class TelemetryError(Exception):
    """Represents a structured telemetry error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        source: Component where the error originated (e.g. ``"config"``).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    source: str = "render_telemetry"
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.source} {self.code.value}: {self.message}"


__all__ = ["TelemetryError"]
