"""Per-identity baseline counts for render delay diffing.

A baseline is the number of timestamps of one time sequence that have already
been accounted for. Entries are keyed by sequence identity, never by value,
and live for the lifetime of the process.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Tuple


def sequence_identity(values: Any) -> Hashable:
    """Return the identity key of a time value container.

    :class:`~render_telemetry.base.models.ArrayVector` handles are used when
    available since they are never reused. Other containers fall back to
    ``id()``; callers pass the container as ``anchor`` to the cache so the
    id cannot be recycled while its entry exists.
    """
    handle = getattr(values, "handle", None)
    if isinstance(handle, int):
        return handle
    return ("id", id(values))


class BaselineCache:
    """Mapping of sequence identity to processed count.

    Each entry optionally holds a strong reference to the container it was
    recorded for (``anchor``). An entry whose anchor is not the container
    being looked up is treated as absent.

    Not synchronized; callers share one instance from a single render loop.
    """

    def __init__(self) -> None:
        self._entries: Dict[Hashable, Tuple[Any, int]] = {}

    def get(self, key: Hashable, anchor: Any = None) -> Optional[int]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored, count = entry
        if stored is not None and stored is not anchor:
            return None
        return count

    def set(self, key: Hashable, count: int, anchor: Any = None) -> None:
        if count < 0:
            raise ValueError(f"baseline count must be non-negative, got {count}")
        self._entries[key] = (anchor, count)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_PROCESS_CACHE = BaselineCache()


def get_process_cache() -> BaselineCache:
    """Return the cache shared by every tracker built without an explicit one."""
    return _PROCESS_CACHE


__all__ = ["BaselineCache", "get_process_cache", "sequence_identity"]
