"""Formatting of wall-clock times and durations."""

from __future__ import annotations

import datetime as _dt
import time as _time


def datetime_now(fmt: str) -> str:
    """Return the current local time formatted with strftime ``fmt``."""
    return _time.strftime(fmt, _time.localtime())


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def duration(seconds: int | _dt.timedelta) -> str:
    """Format a duration as HH:MM:SS; hours are not wrapped at 24."""
    if isinstance(seconds, _dt.timedelta):
        total = int(seconds.total_seconds())
    else:
        total = int(seconds)

    hours = _trunc_div(total, 3600)
    total -= hours * 3600
    minutes = _trunc_div(total, 60)
    total -= minutes * 60
    return f"{hours:02d}:{minutes:02d}:{total:02d}"


def datetime_precise() -> str:
    """Return the current local time as HH:MM:SS.microseconds."""
    now = _dt.datetime.now()
    return f"{now.strftime('%H:%M:%S')}.{now.microsecond:06d}"