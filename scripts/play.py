#!/usr/bin/env python3
"""Play Tic-tac-toe between two agents on the console and report the tally."""

import argparse
import json
import logging
from dataclasses import replace
from typing import List, Optional

from tictactoe import AgentKind, MatchConfig, MatchResult, Position, load_match_config, play_match
from tictactoe.core import Cell, Outcome

AGENT_CHOICES = [kind.value for kind in AgentKind]


def format_board(position: Position) -> str:
    return position.render() + "\n"


def format_results(result: MatchResult) -> str:
    return (
        "\nResults:\n"
        f"x win: {result.x_wins}\n"
        f"o win: {result.o_wins}\n"
        f"draw:  {result.draws}\n"
    )


def build_config(args: argparse.Namespace) -> MatchConfig:
    config = load_match_config(args.config) if args.config else MatchConfig()
    overrides = {}
    if args.player_x is not None:
        overrides["player_x"] = AgentKind.parse(args.player_x)
    if args.player_o is not None:
        overrides["player_o"] = AgentKind.parse(args.player_o)
    if args.game_count is not None:
        overrides["games"] = args.game_count
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.mcts_rounds is not None:
        overrides["mcts"] = replace(config.mcts, rounds=args.mcts_rounds)
    return replace(config, **overrides)


def run(config: MatchConfig, *, quiet: bool = False, as_json: bool = False) -> MatchResult:
    agent_x, agent_o = config.build_agents()
    verbose = not quiet and not as_json

    def show_move(position: Position, cell: Cell) -> None:
        print(format_board(position))

    def show_game_start() -> None:
        print("game start\n")
        print(format_board(Position()))

    def show_outcome(game_index: int, outcome: Outcome) -> None:
        print(outcome)
        if game_index + 1 < config.games:
            show_game_start()

    if verbose:
        print(f"\nplayer x: {agent_x}\nplayer o: {agent_o}\n")
        show_game_start()

    result = play_match(
        agent_x,
        agent_o,
        games=config.games,
        on_move=show_move if verbose else None,
        on_game_end=show_outcome if verbose else None,
    )

    if as_json:
        output = {
            "player_x": config.player_x.value,
            "player_o": config.player_o.value,
            "games": result.games_played,
            "x_wins": result.x_wins,
            "o_wins": result.o_wins,
            "draws": result.draws,
            "x_winrate": result.winrate_x(),
            "o_winrate": result.winrate_o(),
        }
        print(json.dumps(output, indent=2))
    else:
        print(format_results(result))
    return result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play the classic game of Tic-tac-toe against a friend or an AI opponent."
    )
    parser.add_argument("-x", "--player-x", choices=AGENT_CHOICES, help="Sets the player for 'x' (default: human)")
    parser.add_argument("-o", "--player-o", choices=AGENT_CHOICES, help="Sets the player for 'o' (default: mcts)")
    parser.add_argument("-g", "--game-count", type=int, metavar="GAMES", help="Sets the number of games to be played")
    parser.add_argument("--config", type=str, help="YAML file with match settings")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--mcts-rounds", type=int)
    parser.add_argument("--quiet", action="store_true", help="Only print the final results")
    parser.add_argument("--json", action="store_true", help="Print the final results as JSON")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    config = build_config(args)
    run(config, quiet=args.quiet, as_json=args.json)


if __name__ == "__main__":
    main()
