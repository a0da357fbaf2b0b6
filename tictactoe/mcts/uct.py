from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from tictactoe.agents.base import Agent, AgentError, NoLegalMovesError
from tictactoe.core import Cell, Outcome, Position

from .node import NodeArena

logger = logging.getLogger(__name__)


class EmptyChildSetError(AgentError):
    def __init__(self) -> None:
        super().__init__("child node slice is empty")


class UnableToSelectMoveError(AgentError):
    def __init__(self) -> None:
        super().__init__("unable to select a move")


@dataclass
class MCTSConfig:
    rounds: int = 8190
    exploration: float = math.sqrt(2)

    def __post_init__(self) -> None:
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int):
            raise ValueError(f"rounds must be an integer, got {self.rounds!r}")
        if isinstance(self.exploration, bool) or not isinstance(self.exploration, (int, float)):
            raise ValueError(f"exploration must be a number, got {self.exploration!r}")
        if self.rounds < 0:
            raise ValueError("rounds must be non-negative")
        if self.exploration < 0:
            raise ValueError("exploration must be non-negative")


@dataclass
class SearchResult:
    move: Cell
    visit_counts: Dict[Cell, int]
    wins: Dict[Cell, float]
    rounds: int
    node_count: int


def uct_score(wins: float, visits: int, parent_log_visits: float, exploration: float) -> float:
    return wins / visits + exploration * math.sqrt(parent_log_visits / visits)


class MCTS(Agent):
    """Monte Carlo Tree Search with UCT selection and random playouts.

    The tree is rebuilt for every call to :meth:`run`. Every request starts with
    one playout from a random root child, then runs ``config.rounds`` rounds of
    select, expand, simulate and backpropagate. The root child with the most
    visits is played.
    """

    name = "monte carlo tree search"

    def __init__(
        self,
        config: Optional[MCTSConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or MCTSConfig()
        self.rng = rng or np.random.default_rng()
        self._arena = NodeArena()
        self._root_moves: List[Tuple[int, Cell]] = []

    def get_move(self, position: Position) -> Cell:
        return self.run(position).move

    # ------------------------------------------------------------------
    def run(self, position: Position) -> SearchResult:
        self._initialize(position)

        for _ in range(self.config.rounds):
            index = self._select()
            index = self._expand(index)
            outcome = self._simulate(index)
            self._backpropagate(index, outcome)

        move = self._choose()
        result = SearchResult(
            move=move,
            visit_counts={cell: self._arena[i].visit_count for i, cell in self._root_moves},
            wins={cell: self._arena[i].wins for i, cell in self._root_moves},
            rounds=self.config.rounds,
            node_count=len(self._arena),
        )
        logger.debug(
            "mcts chose %s after %d rounds (%d nodes, %d visits)",
            move,
            result.rounds,
            result.node_count,
            result.visit_counts[move],
        )
        return result

    # ------------------------------------------------------------------
    def _initialize(self, position: Position) -> None:
        root = self._arena.reset(position)
        self._root_moves = []

        for cell in position.legal_moves():
            child = position.copy()
            child.place_mark(cell)
            self._root_moves.append((self._arena.add_child(root, child), cell))

        index = self._random_child(root)
        outcome = self._simulate(index)
        self._backpropagate(index, outcome)

    def _random_child(self, index: int) -> int:
        children = self._arena[index].children
        if not children:
            raise EmptyChildSetError()
        return children[int(self.rng.integers(len(children)))]

    def _select(self) -> int:
        index = NodeArena.ROOT
        exploration = self.config.exploration

        while True:
            node = self._arena[index]
            if node.is_leaf():
                return index

            parent_log_visits = math.log(node.visit_count)
            best_score = -math.inf
            best_index = index
            for child_index in node.children:
                child = self._arena[child_index]
                if child.visit_count == 0:
                    return child_index
                score = uct_score(child.wins, child.visit_count, parent_log_visits, exploration)
                if score > best_score:
                    best_score = score
                    best_index = child_index
            index = best_index

    def _expand(self, index: int) -> int:
        position = self._arena[index].position
        if position.is_over:
            return index

        for cell in position.legal_moves():
            child = position.copy()
            child.place_mark(cell)
            self._arena.add_child(index, child)

        return self._random_child(index)

    def _simulate(self, index: int) -> Outcome:
        position = self._arena[index].position.copy()

        while True:
            outcome = position.outcome()
            if outcome is not None:
                return outcome
            moves = position.legal_moves()
            if not moves:
                raise NoLegalMovesError("no moves can be made")
            position.place_mark(moves[int(self.rng.integers(len(moves)))])

    def _backpropagate(self, index: int, outcome: Outcome) -> None:
        # The node's mark was made by the opponent of its side to move; credit
        # flips at each level on the way up.
        draw = outcome is Outcome.DRAW
        add_win = not draw and outcome.winner is not self._arena[index].position.side_to_move()

        cursor: Optional[int] = index
        while cursor is not None:
            node = self._arena[cursor]
            node.visit_count += 1
            if draw:
                node.wins += 0.5
            elif add_win:
                node.wins += 1.0
            add_win = not add_win
            cursor = node.parent

    def _choose(self) -> Cell:
        best_visits = 0
        best_move: Optional[Cell] = None

        for index, cell in self._root_moves:
            visits = self._arena[index].visit_count
            if visits > best_visits:
                best_visits = visits
                best_move = cell

        if best_move is None:
            raise UnableToSelectMoveError()
        return best_move
