"""File descriptor limits and the concurrency they allow."""

from __future__ import annotations

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

_BASE_DESCRIPTORS = 26
_PER_GAME_DESCRIPTORS = 12


def max_system_file_descriptor_count() -> int:
    """Return the soft limit on open file descriptors for this process."""
    if resource is None:
        raise OSError("file descriptor limits are not available on this platform")
    soft, _hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    return soft


def min_file_descriptor_required(concurrency: int) -> int:
    """Return the descriptors needed to run ``concurrency`` games at once."""
    return _BASE_DESCRIPTORS + (concurrency - 1) * _PER_GAME_DESCRIPTORS


def max_concurrency(available_fds: int) -> int:
    """Return the number of concurrent games ``available_fds`` descriptors allow."""
    spare = available_fds - _BASE_DESCRIPTORS
    quotient = abs(spare) // _PER_GAME_DESCRIPTORS
    if spare < 0:
        quotient = -quotient
    return quotient + 1