"""Pinning a process to a set of processors."""

from __future__ import annotations

import os
from collections.abc import Iterable


def set_affinity(cpus: Iterable[int], pid: int) -> bool:
    """Restrict process ``pid`` to the processors ``cpus``.

    Returns True if the mask was applied. Platforms without affinity support
    leave the process untouched and return False.
    """
    setter = getattr(os, "sched_setaffinity", None)
    if setter is None:
        return False

    try:
        setter(pid, set(cpus))
    except OSError:
        return False
    return True