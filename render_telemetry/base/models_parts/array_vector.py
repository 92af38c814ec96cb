"""Identity-carrying value container for frame fields.

``ArrayVector`` wraps a list without copying it and stamps the wrapper with an
opaque integer handle drawn from a process-wide counter. The handle is the
identity used by the render delay baseline cache: it survives in-place
mutation of the wrapped list and is never reused, unlike ``id()``.
"""

from __future__ import annotations

import itertools
from collections.abc import MutableSequence
from typing import Any, Iterable, List, Optional

_HANDLES = itertools.count(1)


class ArrayVector(MutableSequence):
    """Mutable sequence view over a caller-owned list.

    Equality is identity-based (inherited from ``object``); compare
    ``to_array()`` results for value equality.
    """

    __slots__ = ("_buffer", "_handle")

    def __init__(self, buffer: Optional[List[Any]] = None) -> None:
        self._buffer: List[Any] = buffer if buffer is not None else []
        self._handle = next(_HANDLES)

    @classmethod
    def of(cls, values: Iterable[Any] | None) -> "ArrayVector":
        """Return ``values`` as a vector.

        Existing vectors are returned unchanged and lists are wrapped in place;
        any other iterable is copied into a new list.
        """
        if isinstance(values, ArrayVector):
            return values
        if values is None:
            return cls()
        if isinstance(values, list):
            return cls(values)
        return cls(list(values))

    @property
    def handle(self) -> int:
        return self._handle

    def to_array(self) -> List[Any]:
        """Return the wrapped list itself (not a copy)."""
        return self._buffer

    def __getitem__(self, index):
        return self._buffer[index]

    def __setitem__(self, index, value) -> None:
        self._buffer[index] = value

    def __delitem__(self, index) -> None:
        del self._buffer[index]

    def __len__(self) -> int:
        return len(self._buffer)

    def insert(self, index: int, value: Any) -> None:
        self._buffer.insert(index, value)

    def __repr__(self) -> str:
        return f"ArrayVector(handle={self._handle}, values={self._buffer!r})"


__all__ = ["ArrayVector"]
