"""Chess clock bookkeeping for one player."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import timedelta
from typing import Any, Optional


@dataclass
class Limits:
    """Time limits in milliseconds; ``moves`` is the moves-to-go period."""

    increment: int = 0
    fixed_time: int = 0
    time: int = 0
    moves: int = 0
    timemargin: int = 0

    def to_dict(self) -> dict[str, int]:
        """Return the limits as an ordered mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Limits:
        """Build limits from a mapping; every key is required."""
        return cls(
            increment=data["increment"],
            fixed_time=data["fixed_time"],
            time=data["time"],
            moves=data["moves"],
            timemargin=data["timemargin"],
        )


class TimeControl:
    """Tracks the time and moves left on a player's clock."""

    MARGIN = 100

    def __init__(self, limits: Optional[Limits] = None) -> None:
        self.limits = replace(limits) if limits is not None else Limits()
        if self.limits.fixed_time != 0:
            self.time_left = self.limits.fixed_time
        else:
            self.time_left = self.limits.time + self.limits.increment
        self.moves_left = self.limits.moves

    def timeout_threshold(self) -> timedelta:
        """Return how long to wait for a move before declaring a timeout."""
        return timedelta(milliseconds=self.time_left + self.limits.timemargin + self.MARGIN)

    def update_time(self, elapsed_millis: int) -> bool:
        """Charge ``elapsed_millis`` to the clock; return False on a time loss."""
        limits = self.limits

        if limits.moves > 0:
            if self.moves_left == 1:
                self.moves_left = limits.moves
                self.time_left += limits.time
            else:
                self.moves_left -= 1

        if limits.fixed_time == 0 and limits.time + limits.increment == 0:
            return True

        self.time_left -= elapsed_millis

        if self.time_left < -limits.timemargin:
            return False

        if self.time_left < 0:
            self.time_left = 0

        self.time_left += limits.increment

        if limits.fixed_time != 0:
            self.time_left = limits.fixed_time

        return True

    def is_fixed_time(self) -> bool:
        return self.limits.fixed_time != 0

    def is_timed(self) -> bool:
        return self.limits.time != 0

    def is_moves(self) -> bool:
        return self.limits.moves != 0

    def is_increment(self) -> bool:
        return self.limits.increment != 0

    def __str__(self) -> str:
        limits = self.limits
        if limits.fixed_time > 0:
            return f"{limits.fixed_time / 1000.0:.8g}/move"

        parts = []
        if limits.moves == 0 and limits.time == 0 and limits.increment == 0:
            parts.append("-")
        if limits.moves > 0:
            parts.append(f"{limits.moves}/")
        if limits.time + limits.increment > 0:
            parts.append(f"{limits.time / 1000.0:g}")
        if limits.increment > 0:
            parts.append(f"+{limits.increment / 1000.0:g}")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"TimeControl(limits={self.limits!r}, time_left={self.time_left}, "
            f"moves_left={self.moves_left})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return (
            self.limits == other.limits
            and self.time_left == other.time_left
            and self.moves_left == other.moves_left
        )

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """Return the clock state as an ordered mapping."""
        return {
            "limits_": self.limits.to_dict(),
            "time_left_": self.time_left,
            "moves_left_": self.moves_left,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimeControl:
        """Rebuild a clock from :meth:`to_dict` output; every key is required."""
        control = cls(Limits.from_dict(data["limits_"]))
        control.time_left = data["time_left_"]
        control.moves_left = data["moves_left_"]
        return control