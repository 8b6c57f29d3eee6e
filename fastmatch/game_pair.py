"""A pair of values belonging to the white and the black side."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class GamePair(Generic[T, U]):
    """Holds one value for white and one for black."""

    white: Optional[T] = None
    black: Optional[U] = None

    def swap(self, other: GamePair[T, U]) -> None:
        """Exchange both sides with ``other``."""
        self.white, other.white = other.white, self.white
        self.black, other.black = other.black, self.black