"""Board state engine for Tic-tac-toe."""

from .state import Cell, Outcome, Side
from .rules import (
    BOARD_CELLS,
    KEYPAD_CELLS,
    MOVE_ORDER,
    WIN_LINES,
    evaluate_outcome,
    empty_cells,
)
from .position import CellOccupiedError, GameError, GameOverError, Position

__all__ = [
    "Cell",
    "Outcome",
    "Side",
    "BOARD_CELLS",
    "KEYPAD_CELLS",
    "MOVE_ORDER",
    "WIN_LINES",
    "evaluate_outcome",
    "empty_cells",
    "Position",
    "GameError",
    "GameOverError",
    "CellOccupiedError",
]
