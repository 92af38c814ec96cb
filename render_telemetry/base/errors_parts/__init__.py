"""Errors parts package public surface.

Prefer importing from `render_telemetry.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .telemetry_error import TelemetryError

__all__ = ["ErrorCode", "TelemetryError"]
