from __future__ import annotations

from tictactoe.core import Cell, Position


class AgentError(RuntimeError):
    pass


class NoLegalMovesError(AgentError):
    def __init__(self, message: str = "no empty squares are available") -> None:
        super().__init__(message)


class Agent:
    """Agent interface choosing one legal move for the side to move."""

    name = "agent"

    def get_move(self, position: Position) -> Cell:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.name
