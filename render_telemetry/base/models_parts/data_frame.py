"""Columnar data frame made of typed fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .field import Field
from .field_type import FieldType


@dataclass
class DataFrame:
    """Ordered collection of :class:`Field` columns.

    Attributes:
        fields: Columns in display order.
        name: Optional frame name.
        ref_id: Optional query reference the frame was produced by.
    """

    fields: List[Field] = field(default_factory=list)
    name: Optional[str] = None
    ref_id: Optional[str] = None

    @property
    def length(self) -> int:
        """Row count, taken from the first field."""
        return len(self.fields[0].values) if self.fields else 0

    def time_field(self) -> Optional[Field]:
        """Return the first field typed as time, if any."""
        for f in self.fields:
            if f.type is FieldType.TIME:
                return f
        return None


__all__ = ["DataFrame"]
