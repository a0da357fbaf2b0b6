from __future__ import annotations

from typing import Optional

import numpy as np

from tictactoe.core import Cell, Position

from .base import Agent, NoLegalMovesError


class RandomAgent(Agent):
    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def get_move(self, position: Position) -> Cell:
        moves = position.legal_moves()
        if not moves:
            raise NoLegalMovesError("unable to choose a move because there are no empty squares")
        return moves[int(self.rng.integers(len(moves)))]
