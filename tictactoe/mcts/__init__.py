"""Monte Carlo Tree Search agent."""

from .node import Node, NodeArena
from .uct import (
    MCTS,
    EmptyChildSetError,
    MCTSConfig,
    SearchResult,
    UnableToSelectMoveError,
    uct_score,
)

__all__ = [
    "MCTS",
    "MCTSConfig",
    "SearchResult",
    "Node",
    "NodeArena",
    "EmptyChildSetError",
    "UnableToSelectMoveError",
    "uct_score",
]
