"""Process-wide random number generation."""

from __future__ import annotations

import random as _random
import secrets

_UINT64_BITS = 64

_generator = _random.Random()


def random_uint64() -> int:
    """Return a fresh, non-deterministic unsigned 64-bit integer."""
    return secrets.randbits(_UINT64_BITS)


def seed(value: int) -> None:
    """Seed the shared generator."""
    _generator.seed(value)


def generator() -> _random.Random:
    """Return the shared generator used for reproducible choices."""
    return _generator