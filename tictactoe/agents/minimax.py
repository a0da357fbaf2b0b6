"""Exhaustive minimax search.

Positions are scored on an integer scale from ``O_WIN`` (0) to ``X_WIN`` (32)
with ``DRAW`` (16) in the middle. A game ending ``depth`` plies below the first
candidate move is scored ``X_WIN - depth`` or ``O_WIN + depth``, so X prefers
quicker wins and slower losses and O does the same from the other end. There is
no pruning and no transposition table; the full tree is at most 9! paths.
"""

from __future__ import annotations

from typing import Optional

from tictactoe.core import Cell, Outcome, Position, Side

from .base import Agent, NoLegalMovesError

X_WIN = 32
DRAW = X_WIN // 2
O_WIN = 0


def terminal_value(outcome: Outcome, depth: int) -> int:
    if outcome is Outcome.DRAW:
        return DRAW
    if outcome is Outcome.X_WIN:
        return X_WIN - depth
    return O_WIN + depth


def _child_value(position: Position, cell: Cell, depth: int) -> int:
    child = position.copy()
    child.place_mark(cell)
    outcome = child.outcome()
    if outcome is not None:
        return terminal_value(outcome, depth)
    if child.side_to_move() is Side.X:
        return max_value(child, depth + 1)
    return min_value(child, depth + 1)


def max_value(position: Position, depth: int) -> int:
    value = O_WIN
    for cell in position.legal_moves():
        value = max(_child_value(position, cell, depth), value)
    return value


def min_value(position: Position, depth: int) -> int:
    value = X_WIN
    for cell in position.legal_moves():
        value = min(_child_value(position, cell, depth), value)
    return value


def best_move(position: Position) -> Cell:
    """Return the best move for the side to move, the first one found on ties."""
    maximise = position.side_to_move() is Side.X
    best_cell: Optional[Cell] = None
    best_value = O_WIN if maximise else X_WIN

    for cell in position.legal_moves():
        value = _child_value(position, cell, 0)
        improved = value > best_value if maximise else value < best_value
        if best_cell is None or improved:
            best_value = value
            best_cell = cell

    if best_cell is None:
        raise NoLegalMovesError("no empty squares are available on the current node")
    return best_cell


class MinimaxAgent(Agent):
    name = "minimax"

    def get_move(self, position: Position) -> Cell:
        return best_move(position)
