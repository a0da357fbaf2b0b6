from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional


class Cell(IntEnum):
    """Board cells, valued by their bit index (row-major from the top left)."""

    TOP_LEFT = 0
    TOP_MIDDLE = 1
    TOP_RIGHT = 2
    MIDDLE_LEFT = 3
    MIDDLE_MIDDLE = 4
    MIDDLE_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_MIDDLE = 7
    BOTTOM_RIGHT = 8

    @property
    def row(self) -> int:
        return int(self) // 3

    @property
    def col(self) -> int:
        return int(self) % 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


class Side(Enum):
    X = "x"
    O = "o"

    @property
    def opponent(self) -> "Side":
        return Side.O if self is Side.X else Side.X

    def __str__(self) -> str:
        return self.value


class Outcome(Enum):
    DRAW = "draw"
    X_WIN = "x win"
    O_WIN = "o win"

    @property
    def winner(self) -> Optional[Side]:
        if self is Outcome.X_WIN:
            return Side.X
        if self is Outcome.O_WIN:
            return Side.O
        return None

    def __str__(self) -> str:
        return self.value
