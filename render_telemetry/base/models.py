"""Frame data model and snapshot helpers.

Re-exports the one-class-per-file model types and adds the two helpers the
tracker relies on:

- :func:`to_data_frame` builds a :class:`DataFrame` from a plain mapping
  (``{"name": ..., "fields": [{"name", "type", "values"}, ...]}``).
- :func:`find_time_field` locates the time field of a *snapshot*, which may
  be a single frame, a sequence of frames (panel data), or ``None``.

Any object exposing ``fields`` whose items carry ``type`` and ``values`` is
accepted as a frame; the built-in classes are a convenience, not a
requirement.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from .errors import ErrorCode, TelemetryError
from .interfaces import FieldLike, FrameLike
from .models_parts import ArrayVector, DataFrame, Field, FieldType


def to_data_frame(source: DataFrame | Mapping[str, Any]) -> DataFrame:
    """Return ``source`` as a :class:`DataFrame`.

    Frames are returned unchanged. Mappings must provide a ``fields`` list;
    each field mapping needs a ``name`` and may give ``type`` (default
    ``"other"``), ``values`` and ``config``. Field value lists are wrapped,
    not copied.

    Raises:
        TelemetryError: ``VALIDATION`` when the mapping is malformed or a time
            field holds non-numeric values.
    """
    if isinstance(source, DataFrame):
        return source
    if not isinstance(source, Mapping):
        raise TelemetryError(ErrorCode.VALIDATION, f"cannot build a frame from {type(source).__name__}", source="models")
    raw_fields = source.get("fields") or []
    fields = []
    for raw in raw_fields:
        if isinstance(raw, Field):
            fields.append(raw)
            continue
        if not isinstance(raw, Mapping) or "name" not in raw:
            raise TelemetryError(ErrorCode.VALIDATION, f"field definition requires a name: {raw!r}", source="models")
        fields.append(
            Field(
                name=raw["name"],
                type=raw.get("type", FieldType.OTHER),
                values=raw.get("values"),
                config=dict(raw.get("config") or {}),
            )
        )
    return DataFrame(fields=fields, name=source.get("name"), ref_id=source.get("ref_id") or source.get("refId"))


def _time_field_of(frame: Any) -> Optional[FieldLike]:
    if isinstance(frame, DataFrame):
        return frame.time_field()
    for f in getattr(frame, "fields", None) or ():
        if getattr(f, "type", None) == FieldType.TIME:
            return f
    return None


Snapshot = Union[FrameLike, Sequence[FrameLike], None]


def find_time_field(snapshot: Snapshot) -> Optional[FieldLike]:
    """Return the time field of ``snapshot`` or ``None``.

    For a sequence of frames, the first frame that carries a time field wins.
    """
    if snapshot is None:
        return None
    if hasattr(snapshot, "fields"):
        return _time_field_of(snapshot)
    if isinstance(snapshot, (str, bytes, Mapping)):
        return None
    for frame in snapshot:
        found = _time_field_of(frame)
        if found is not None:
            return found
    return None


__all__ = [
    "ArrayVector",
    "DataFrame",
    "Field",
    "FieldType",
    "Snapshot",
    "find_time_field",
    "to_data_frame",
]
