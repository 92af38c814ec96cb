"""Semantic field types for frame columns."""

from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    """Semantic type of a frame field.

    Values compare equal to their plain string form, so foreign frames using
    ``"time"`` as the field type are recognised without conversion.
    """

    TIME = "time"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OTHER = "other"


__all__ = ["FieldType"]
