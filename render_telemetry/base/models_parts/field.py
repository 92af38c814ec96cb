"""Typed frame column."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict

from ..errors import ErrorCode, TelemetryError
from .array_vector import ArrayVector
from .field_type import FieldType


@dataclass
class Field:
    """A named, typed column of a :class:`DataFrame`.

    ``values`` is always an :class:`ArrayVector`; lists passed in are wrapped
    without copying so that appending to the original list is visible here.
    Time fields must hold numeric epoch-millisecond timestamps.
    """

    name: str
    type: FieldType = FieldType.OTHER
    values: ArrayVector = field(default_factory=ArrayVector)
    config: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        try:
            self.type = FieldType(self.type)
        except ValueError as exc:
            raise TelemetryError(
                ErrorCode.VALIDATION,
                f"unknown field type {self.type!r} for field {self.name!r}",
                source="models",
                raw=exc,
            ) from exc
        self.values = ArrayVector.of(self.values)
        if self.type is FieldType.TIME:
            for value in self.values:
                if isinstance(value, bool) or not isinstance(value, numbers.Real):
                    raise TelemetryError(
                        ErrorCode.VALIDATION,
                        f"time field {self.name!r} holds non-numeric value {value!r}",
                        source="models",
                    )

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["Field"]
