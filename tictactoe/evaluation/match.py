from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from tictactoe.agents import Agent
from tictactoe.core import Cell, Outcome, Position, Side

logger = logging.getLogger(__name__)

MoveCallback = Callable[[Position, Cell], None]


@dataclass
class MatchResult:
    games_played: int
    x_wins: int
    o_wins: int
    draws: int

    def winrate_x(self) -> float:
        return self.x_wins / max(1, self.games_played)

    def winrate_o(self) -> float:
        return self.o_wins / max(1, self.games_played)

    def draw_rate(self) -> float:
        return self.draws / max(1, self.games_played)


def play_game(
    agent_x: Agent,
    agent_o: Agent,
    *,
    on_move: Optional[MoveCallback] = None,
) -> Outcome:
    position = Position()

    while True:
        agent = agent_x if position.side_to_move() is Side.X else agent_o
        cell = agent.get_move(position)
        position.place_mark(cell)
        if on_move is not None:
            on_move(position, cell)

        outcome = position.outcome()
        if outcome is not None:
            return outcome


def play_match(
    agent_x: Agent,
    agent_o: Agent,
    *,
    games: int,
    on_move: Optional[MoveCallback] = None,
    on_game_end: Optional[Callable[[int, Outcome], None]] = None,
) -> MatchResult:
    if games < 1:
        raise ValueError("games must be at least 1")

    x_wins = 0
    o_wins = 0
    draws = 0

    for game_index in range(games):
        outcome = play_game(agent_x, agent_o, on_move=on_move)
        logger.debug("game %d finished: %s", game_index + 1, outcome)
        if outcome is Outcome.X_WIN:
            x_wins += 1
        elif outcome is Outcome.O_WIN:
            o_wins += 1
        else:
            draws += 1
        if on_game_end is not None:
            on_game_end(game_index, outcome)

    result = MatchResult(games_played=games, x_wins=x_wins, o_wins=o_wins, draws=draws)
    logger.info(
        "%s (x) vs %s (o): %d x wins, %d o wins, %d draws",
        agent_x,
        agent_o,
        result.x_wins,
        result.o_wins,
        result.draws,
    )
    return result
