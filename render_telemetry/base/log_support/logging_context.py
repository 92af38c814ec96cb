"""Structured logging context for render telemetry events.

:class:`LogContext` carries the metric name shared by events emitted for one
measurement plus a free-form ``extra`` mapping. ``None`` values are pruned
by ``to_dict``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for render telemetry logging events."""

    metric: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
