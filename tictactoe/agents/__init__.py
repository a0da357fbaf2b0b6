"""Move-selecting agents."""

from .base import Agent, AgentError, NoLegalMovesError
from .human import HumanAgent, InputClosedError, parse_keypad
from .minimax import MinimaxAgent, best_move
from .random_agent import RandomAgent

__all__ = [
    "Agent",
    "AgentError",
    "NoLegalMovesError",
    "HumanAgent",
    "InputClosedError",
    "parse_keypad",
    "MinimaxAgent",
    "best_move",
    "RandomAgent",
]
