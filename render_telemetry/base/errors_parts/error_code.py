"""
Normalized telemetry error codes (taxonomy).

Defines the `ErrorCode` enumeration raised with :class:`TelemetryError`.
Values are lowercase snake_case and are part of the logging contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error categories for render telemetry."""

    VALIDATION = "validation"
    CONFIG = "config"


__all__ = ["ErrorCode"]
