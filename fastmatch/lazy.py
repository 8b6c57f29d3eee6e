"""A value computed on first use, thread-safely."""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Holds an initializer and runs it once, on the first call to :meth:`get`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._initializer: Optional[Callable[[], T]] = None
        self._instance: Optional[T] = None
        self._ready = False

    def setup(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> None:
        """Set the initializer and discard any value already computed."""
        with self._lock:
            self._instance = None
            self._ready = False
            self._initializer = functools.partial(func, *args, **kwargs)

    def get(self) -> T:
        """Return the value, computing it on first use."""
        if not self._ready:
            with self._lock:
                if not self._ready:
                    if self._initializer is None:
                        raise RuntimeError("Lazy value has not been set up")
                    self._instance = self._initializer()
                    self._ready = True
        return self._instance  # type: ignore[return-value]