"""Time controls, CPU affinity, thread helpers and utilities for chess engine matches."""

__version__ = "0.1.0"