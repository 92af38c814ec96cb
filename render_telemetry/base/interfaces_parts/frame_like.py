"""Structural protocols for frames accepted by the delay tracker.

The tracker never requires the built-in :class:`DataFrame`; anything with a
``fields`` iterable of objects exposing ``type`` and ``values`` will do.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class FieldLike(Protocol):
    """A typed column holding an ordered value sequence."""

    type: Any
    values: Sequence[Any]


@runtime_checkable
class FrameLike(Protocol):
    """A collection of typed columns."""

    fields: Iterable[FieldLike]


__all__ = ["FieldLike", "FrameLike"]
