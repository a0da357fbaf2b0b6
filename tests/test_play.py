import json

import pytest

from scripts.play import build_config, main, parse_args
from tictactoe import AgentKind


def test_json_results_for_seeded_random_match(capsys):
    main(["-x", "random", "-o", "random", "-g", "4", "--seed", "0", "--json"])

    output = json.loads(capsys.readouterr().out)
    assert output["games"] == 4
    assert output["x_wins"] + output["o_wins"] + output["draws"] == 4
    assert output["player_x"] == "random"


def test_verbose_output_prints_boards_and_results(capsys):
    main(["-x", "random", "-o", "minimax", "--seed", "1"])

    out = capsys.readouterr().out
    assert "player x: random" in out
    assert "player o: minimax" in out
    assert "game start" in out
    assert "Results:" in out


def test_flags_override_config_file(tmp_path):
    path = tmp_path / "match.yaml"
    path.write_text("player_x: minimax\nplayer_o: random\ngames: 5\n", encoding="utf-8")

    config = build_config(parse_args(["--config", str(path), "-o", "mcts", "--mcts-rounds", "32"]))

    assert config.player_x is AgentKind.MINIMAX
    assert config.player_o is AgentKind.MCTS
    assert config.games == 5
    assert config.mcts.rounds == 32


def test_zero_games_is_rejected():
    with pytest.raises(ValueError):
        build_config(parse_args(["-g", "0"]))
