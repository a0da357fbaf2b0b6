"""Tic-tac-toe with random, minimax, Monte Carlo Tree Search and human agents."""

from . import agents, core, evaluation, mcts
from .agents import (
    Agent,
    AgentError,
    HumanAgent,
    InputClosedError,
    MinimaxAgent,
    NoLegalMovesError,
    RandomAgent,
)
from .agents.registry import AgentKind, make_agent
from .config import MatchConfig, load_match_config
from .core import (
    Cell,
    CellOccupiedError,
    GameError,
    GameOverError,
    Outcome,
    Position,
    Side,
)
from .evaluation import MatchResult, play_game, play_match
from .mcts import MCTS, EmptyChildSetError, MCTSConfig, SearchResult, UnableToSelectMoveError

__all__ = [
    "agents",
    "core",
    "evaluation",
    "mcts",
    "Agent",
    "AgentError",
    "AgentKind",
    "make_agent",
    "HumanAgent",
    "InputClosedError",
    "MinimaxAgent",
    "NoLegalMovesError",
    "RandomAgent",
    "MatchConfig",
    "load_match_config",
    "Cell",
    "CellOccupiedError",
    "GameError",
    "GameOverError",
    "Outcome",
    "Position",
    "Side",
    "MatchResult",
    "play_game",
    "play_match",
    "MCTS",
    "MCTSConfig",
    "SearchResult",
    "EmptyChildSetError",
    "UnableToSelectMoveError",
]
