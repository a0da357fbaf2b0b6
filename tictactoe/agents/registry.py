from __future__ import annotations

from enum import Enum
from typing import Optional, Union

import numpy as np

from tictactoe.mcts import MCTS, MCTSConfig

from .base import Agent
from .human import HumanAgent
from .minimax import MinimaxAgent
from .random_agent import RandomAgent


class AgentKind(Enum):
    MCTS = "mcts"
    MINIMAX = "minimax"
    RANDOM = "random"
    HUMAN = "human"

    @classmethod
    def parse(cls, value: Union[str, "AgentKind"]) -> "AgentKind":
        if isinstance(value, AgentKind):
            return value
        if not isinstance(value, str):
            raise ValueError(f"agent kind must be a string, got {value!r}")
        try:
            return cls(value.lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"unknown agent kind {value!r} (expected one of: {choices})") from None


def make_agent(
    kind: AgentKind,
    *,
    seed: Optional[int] = None,
    mcts_config: Optional[MCTSConfig] = None,
) -> Agent:
    if kind is AgentKind.MCTS:
        return MCTS(mcts_config, rng=np.random.default_rng(seed))
    if kind is AgentKind.MINIMAX:
        return MinimaxAgent()
    if kind is AgentKind.RANDOM:
        return RandomAgent(np.random.default_rng(seed))
    if kind is AgentKind.HUMAN:
        return HumanAgent()
    raise ValueError(f"unsupported agent kind: {kind}")
