"""A list guarded by a lock."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from types import TracebackType
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadVector(Generic[T]):
    """A list whose mutations are thread-safe.

    Iteration is not locked; hold the vector with ``with vec:`` while iterating
    if other threads may change it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._lock = threading.RLock()
        self._items: list[T] = list(items)

    def push(self, element: T) -> None:
        with self._lock:
            self._items.append(element)

    def remove(self, element: T) -> None:
        """Remove every element equal to ``element``."""
        with self._lock:
            self._items = [item for item in self._items if item != element]

    def remove_if(self, predicate: Callable[[T], bool]) -> int:
        """Remove every element matching ``predicate``; return how many were removed."""
        with self._lock:
            kept = [item for item in self._items if not predicate(item)]
            removed = len(self._items) - len(kept)
            self._items = kept
            return removed

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __enter__(self) -> ThreadVector[T]:
        self._lock.acquire()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._lock.release()