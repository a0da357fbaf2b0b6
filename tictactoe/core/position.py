from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
from numpy.typing import NDArray

from . import rules
from .state import Cell, Outcome, Side

BoardArray = NDArray[np.int8]


class GameError(ValueError):
    pass


class GameOverError(GameError):
    def __init__(self, outcome: Outcome) -> None:
        super().__init__(f"the game is already over ({outcome})")
        self.outcome = outcome


class CellOccupiedError(GameError):
    def __init__(self, cell: Cell) -> None:
        super().__init__(f"{cell!s} square is not empty")
        self.cell = cell


class Position:
    """A Tic-tac-toe position: packed marks, side to move and cached outcome.

    Positions are mutated only through :meth:`place_mark`. Search code works on
    :meth:`copy` results and never writes back into the position it was given.
    """

    __slots__ = ("_board", "_side", "_outcome")

    def __init__(self) -> None:
        self._board: int = rules.EMPTY_BOARD
        self._side: Side = Side.X
        self._outcome: Optional[Outcome] = None

    @classmethod
    def from_moves(cls, cells: Iterable[Cell]) -> "Position":
        """Replay ``cells`` from the empty board, X first."""
        position = cls()
        for cell in cells:
            position.place_mark(cell)
        return position

    def copy(self) -> "Position":
        clone = Position.__new__(Position)
        clone._board = self._board
        clone._side = self._side
        clone._outcome = self._outcome
        return clone

    # ------------------------------------------------------------------
    def place_mark(self, cell: Cell) -> None:
        if self._outcome is not None:
            raise GameOverError(self._outcome)
        if not rules.is_cell_empty(self._board, cell):
            raise CellOccupiedError(cell)

        self._board |= rules.mark_bit(cell, self._side)
        self._outcome = rules.evaluate_outcome(self._board)
        self._side = self._side.opponent

    def legal_moves(self) -> List[Cell]:
        return rules.empty_cells(self._board)

    def side_to_move(self) -> Side:
        return self._side

    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome is not None

    @property
    def board(self) -> int:
        return self._board

    def cell(self, cell: Cell) -> Optional[Side]:
        return rules.occupant(self._board, cell)

    def mark_count(self, side: Side) -> int:
        return rules.count_marks(self._board, side)

    # ------------------------------------------------------------------
    def to_array(self) -> BoardArray:
        """3x3 array with 0 for empty, 1 for X and 2 for O."""
        grid = np.zeros((3, 3), dtype=np.int8)
        for cell in Cell:
            side = self.cell(cell)
            if side is Side.X:
                grid[cell.row, cell.col] = 1
            elif side is Side.O:
                grid[cell.row, cell.col] = 2
        return grid

    def render(self) -> str:
        symbols = {0: " ", 1: "x", 2: "o"}
        grid = self.to_array()
        return "\n".join("|" + " ".join(symbols[int(value)] for value in row) + "|" for row in grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._board == other._board
            and self._side == other._side
            and self._outcome == other._outcome
        )

    def __repr__(self) -> str:
        return f"Position(side={self._side}, outcome={self._outcome})\n{self.render()}"
