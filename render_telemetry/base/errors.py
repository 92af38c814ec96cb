"""Telemetry error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``render_telemetry.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.telemetry_error import TelemetryError

__all__ = ["ErrorCode", "TelemetryError"]
