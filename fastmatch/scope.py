"""Entries that are borrowed from a pool and released when a scope ends."""

from __future__ import annotations

import threading
from collections.abc import Callable
from types import TracebackType
from typing import Generic, Hashable, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound="ScopeEntry")


class ScopeEntry:
    """Something that is either available or in use."""

    def __init__(self, available: bool) -> None:
        self.available = available

    def release(self) -> None:
        """Mark the entry as available again."""
        self.available = True


class ScopeGuard(Generic[E]):
    """Context manager that releases an entry when the block is left."""

    def __init__(self, entry: E) -> None:
        if not isinstance(entry, ScopeEntry):
            raise TypeError("ScopeGuard requires a ScopeEntry")
        self.entry = entry

    def __enter__(self) -> E:
        return self.entry

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.entry.release()


class CachedEntry(ScopeEntry, Generic[T]):
    """A pooled value with the identifier it was created for; starts in use."""

    def __init__(self, identifier: Hashable, value: T) -> None:
        super().__init__(False)
        self.identifier = identifier
        self.value = value


class CachePool(Generic[T]):
    """Thread-safe pool of reusable values keyed by an identifier."""

    def __init__(self) -> None:
        self._cache: list[CachedEntry[T]] = []
        self._lock = threading.Lock()

    def get_entry(self, identifier: Hashable, factory: Callable[[], T]) -> CachedEntry[T]:
        """Borrow a free entry for ``identifier``, creating one with ``factory`` if none is free."""
        with self._lock:
            for entry in self._cache:
                if entry.available and entry.identifier == identifier:
                    entry.available = False
                    return entry

            entry = CachedEntry(identifier, factory())
            self._cache.append(entry)
            return entry