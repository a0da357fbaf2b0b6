import numpy as np
import pytest

from tictactoe.core import Cell, Position
from tictactoe.mcts import MCTS, EmptyChildSetError, MCTSConfig, NodeArena, uct_score

X_WINS_WITH_BOTTOM_RIGHT = [
    Cell.TOP_LEFT,
    Cell.TOP_MIDDLE,
    Cell.MIDDLE_MIDDLE,
    Cell.MIDDLE_LEFT,
]

# One empty cell left (bottom right), X to move.
LAST_MOVE_WINS = [
    Cell.TOP_LEFT,
    Cell.TOP_MIDDLE,
    Cell.TOP_RIGHT,
    Cell.MIDDLE_LEFT,
    Cell.MIDDLE_RIGHT,
    Cell.MIDDLE_MIDDLE,
    Cell.BOTTOM_MIDDLE,
    Cell.BOTTOM_LEFT,
]
LAST_MOVE_DRAWS = [
    Cell.TOP_LEFT,
    Cell.TOP_MIDDLE,
    Cell.TOP_RIGHT,
    Cell.MIDDLE_MIDDLE,
    Cell.MIDDLE_LEFT,
    Cell.MIDDLE_RIGHT,
    Cell.BOTTOM_MIDDLE,
    Cell.BOTTOM_LEFT,
]


def test_uct_score_formula():
    assert uct_score(3.0, 4, 0.0, 1.0) == pytest.approx(0.75)
    expected = 0.5 + np.sqrt(2) * np.sqrt(np.log(10) / 2)
    assert uct_score(1.0, 2, float(np.log(10)), float(np.sqrt(2))) == pytest.approx(expected)


def test_mcts_finds_forced_win():
    position = Position.from_moves(X_WINS_WITH_BOTTOM_RIGHT)

    choices = [
        MCTS(rng=np.random.default_rng(seed)).get_move(position)
        for seed in range(60)
    ]

    assert choices.count(Cell.BOTTOM_RIGHT) / len(choices) > 0.95


def test_root_visits_count_every_round():
    position = Position.from_moves([Cell.MIDDLE_MIDDLE])
    mcts = MCTS(MCTSConfig(rounds=300), rng=np.random.default_rng(0))

    result = mcts.run(position)

    assert sum(result.visit_counts.values()) == 301
    assert mcts._arena.root.visit_count == 301
    assert set(result.visit_counts) == set(position.legal_moves())
    assert result.visit_counts[result.move] == max(result.visit_counts.values())
    assert result.node_count == len(mcts._arena)


def test_tree_nodes_extend_parent_by_one_mark():
    mcts = MCTS(MCTSConfig(rounds=500), rng=np.random.default_rng(1))
    mcts.run(Position())
    arena = mcts._arena

    assert arena.root.parent is None
    for index in range(1, len(arena)):
        node = arena[index]
        parent = arena[node.parent]
        assert index in parent.children
        added = node.position.board & ~parent.position.board
        assert bin(added).count("1") == 1
        assert node.position.board & parent.position.board == parent.position.board
        assert node.position.side_to_move() == parent.position.side_to_move().opponent
        assert parent.position.outcome() is None


def test_tree_is_rebuilt_for_every_request():
    mcts = MCTS(MCTSConfig(rounds=200), rng=np.random.default_rng(2))
    mcts.run(Position())
    position = Position.from_moves(X_WINS_WITH_BOTTOM_RIGHT)

    result = mcts.run(position)

    assert mcts._arena.root.position == position
    assert sum(result.visit_counts.values()) == 201


def test_zero_rounds_still_plays_initial_playout():
    position = Position.from_moves([Cell.MIDDLE_MIDDLE, Cell.TOP_LEFT])
    result = MCTS(MCTSConfig(rounds=0), rng=np.random.default_rng(3)).run(position)

    assert result.move in position.legal_moves()
    assert sum(result.visit_counts.values()) == 1
    assert result.visit_counts[result.move] == 1


def test_win_credit_goes_to_the_side_that_moved():
    position = Position.from_moves(LAST_MOVE_WINS)
    mcts = MCTS(MCTSConfig(rounds=4), rng=np.random.default_rng(4))

    result = mcts.run(position)

    assert result.move == Cell.BOTTOM_RIGHT
    assert result.visit_counts[Cell.BOTTOM_RIGHT] == 5
    assert result.wins[Cell.BOTTOM_RIGHT] == 5.0
    assert mcts._arena.root.wins == 0.0
    # Terminal nodes are never expanded.
    assert len(mcts._arena) == 2


def test_draw_credits_half_a_win_at_every_level():
    position = Position.from_moves(LAST_MOVE_DRAWS)
    mcts = MCTS(MCTSConfig(rounds=1), rng=np.random.default_rng(5))

    result = mcts.run(position)

    assert result.visit_counts[Cell.BOTTOM_RIGHT] == 2
    assert result.wins[Cell.BOTTOM_RIGHT] == 1.0
    assert mcts._arena.root.wins == 1.0


def test_full_board_has_no_children_to_search():
    position = Position.from_moves(LAST_MOVE_DRAWS + [Cell.BOTTOM_RIGHT])
    with pytest.raises(EmptyChildSetError):
        MCTS(rng=np.random.default_rng(6)).get_move(position)


def test_search_does_not_modify_position():
    position = Position.from_moves([Cell.MIDDLE_MIDDLE])
    before = position.copy()

    MCTS(MCTSConfig(rounds=100), rng=np.random.default_rng(7)).get_move(position)

    assert position == before


def test_config_validation():
    with pytest.raises(ValueError):
        MCTSConfig(rounds=-1)
    with pytest.raises(ValueError):
        MCTSConfig(exploration=-0.5)
    assert MCTSConfig().rounds == 8190


def test_arena_links_children_by_index():
    arena = NodeArena()
    root = arena.reset(Position())
    child_position = Position.from_moves([Cell.MIDDLE_MIDDLE])

    child = arena.add_child(root, child_position)

    assert root == NodeArena.ROOT
    assert arena[root].children == [child]
    assert arena[child].parent == root
    assert arena[child].is_leaf()
    assert len(arena) == 2
