"""Cached event list behind the mutate-then-invalidate contract."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol

Loader = Callable[[], List[Dict[str, Any]]]


class ListCache(Protocol):
    def get(self) -> Optional[List[Dict[str, Any]]]: ...

    def set(self, events: List[Dict[str, Any]]) -> None: ...

    def invalidate(self) -> None: ...


class InMemoryListCache:
    """Holds the last fetched list until a mutation invalidates it."""

    def __init__(self) -> None:
        self._events: Optional[List[Dict[str, Any]]] = None

    def get(self) -> Optional[List[Dict[str, Any]]]:
        return None if self._events is None else list(self._events)

    def set(self, events: List[Dict[str, Any]]) -> None:
        self._events = list(events)

    def invalidate(self) -> None:
        self._events = None


def read_through(cache: ListCache, loader: Loader) -> List[Dict[str, Any]]:
    cached = cache.get()
    if cached is not None:
        return cached
    events = loader()
    cache.set(events)
    return list(events)


__all__ = ["InMemoryListCache", "ListCache", "Loader", "read_through"]
