from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from tictactoe.agents import Agent
from tictactoe.agents.registry import AgentKind, make_agent
from tictactoe.mcts import MCTSConfig

MINIMUM_GAME_COUNT = 1


def _check_keys(config_cls: type, values: Dict[str, Any]) -> None:
    known = {f.name for f in fields(config_cls)}
    unknown = sorted(str(key) for key in set(values) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")


@dataclass
class MatchConfig:
    player_x: AgentKind = AgentKind.HUMAN
    player_o: AgentKind = AgentKind.MCTS
    games: int = MINIMUM_GAME_COUNT
    seed: Optional[int] = None
    mcts: MCTSConfig = field(default_factory=MCTSConfig)

    def __post_init__(self) -> None:
        self.player_x = AgentKind.parse(self.player_x)
        self.player_o = AgentKind.parse(self.player_o)
        if isinstance(self.games, bool) or not isinstance(self.games, int):
            raise ValueError(f"games must be an integer, got {self.games!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if self.games < MINIMUM_GAME_COUNT:
            raise ValueError(f"games must be at least {MINIMUM_GAME_COUNT}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "MatchConfig":
        _check_keys(cls, values)
        values = dict(values)
        mcts = values.pop("mcts", None) or {}
        if not isinstance(mcts, MCTSConfig):
            if not isinstance(mcts, dict):
                raise ValueError(f"mcts settings must be a mapping, got {mcts!r}")
            _check_keys(MCTSConfig, mcts)
            mcts = MCTSConfig(**mcts)
        return cls(mcts=mcts, **values)

    def build_agents(self) -> Tuple[Agent, Agent]:
        seed_x = self.seed
        seed_o = None if self.seed is None else self.seed + 1
        agent_x = make_agent(self.player_x, seed=seed_x, mcts_config=self.mcts)
        agent_o = make_agent(self.player_o, seed=seed_o, mcts_config=self.mcts)
        return agent_x, agent_o


def load_match_config(path: Union[str, Path]) -> MatchConfig:
    cfg_path = Path(path)
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{cfg_path} must contain a mapping")
    return MatchConfig.from_dict(cfg)
