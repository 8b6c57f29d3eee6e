"""A fixed-size pool of worker threads consuming a task queue."""

from __future__ import annotations

import contextlib
import functools
import threading
from collections import deque
from collections.abc import Callable
from types import TracebackType
from typing import Any, Optional


class ThreadPool:
    """Runs queued callables on a set of worker threads.

    Results and exceptions of tasks are discarded.
    """

    def __init__(self, num_threads: int) -> None:
        self._tasks: deque[Callable[[], Any]] = deque()
        self._workers: list[threading.Thread] = []
        self._condition = threading.Condition()
        self._stop = False
        self._spawn(num_threads)

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Queue ``func(*args, **kwargs)`` for execution."""
        task = functools.partial(func, *args, **kwargs)
        with self._condition:
            if self._stop:
                raise RuntimeError("Error; enqueue on stopped ThreadPool")
            self._tasks.append(task)
            self._condition.notify()

    def resize(self, num_threads: int) -> None:
        """Restart the pool with ``num_threads`` workers, dropping queued tasks."""
        if num_threads < 1:
            raise ValueError("Error; ThreadPool.resize() - num_threads cannot be 0")
        if num_threads == len(self._workers):
            return
        self.kill()
        with self._condition:
            self._stop = False
        self._spawn(num_threads)

    def kill(self) -> None:
        """Stop the workers, discard queued tasks and wait for running ones."""
        with self._condition:
            if self._stop:
                return
            self._stop = True
            self._tasks.clear()
            self._condition.notify_all()

        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()
        self._workers.clear()

    def queue_size(self) -> int:
        with self._condition:
            return len(self._tasks)

    def stopped(self) -> bool:
        return self._stop

    def num_threads(self) -> int:
        return len(self._workers)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.kill()

    def _spawn(self, count: int) -> None:
        for _ in range(count):
            worker = threading.Thread(target=self._work, daemon=True)
            worker.start()
            self._workers.append(worker)

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                task = self._tasks.popleft()
            # A failing task must not take the worker down.
            with contextlib.suppress(Exception):
                task()