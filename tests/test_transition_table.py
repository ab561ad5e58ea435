import numpy as np
import pytest
from config import NUM_EDGE_STATES, SOLVED_STATE
from transition_table import (MOVES, build_move_table, get_move_table, validate_table,
                              base_transition)


def test_table_shape_and_order(move_table):
    assert move_table.transitions.shape == (18, NUM_EDGE_STATES)
    assert move_table.moves == tuple(MOVES)
    assert move_table.moves[-3:] == ("B", "B'", "B2")
    assert all(not move.startswith("B") for move in move_table.moves[:-3])
    assert list(move_table.move_faces) == [0, 1, 2, 3, 4] * 3 + [5, 5, 5]


def test_table_is_cached_and_read_only():
    assert get_move_table() is get_move_table()
    with pytest.raises(ValueError):
        get_move_table().transitions[0, 0] = 1


def test_base_transition_cycles():
    transition = base_transition("F")
    assert transition[8] == (4, 1)
    assert transition[7] == (8, 1)
    assert transition[1] == (1, 0)
    assert base_transition("U")[9] == (8, 0)


@pytest.mark.parametrize("move", MOVES)
def test_move_then_inverse_is_identity(move_table, move):
    face, modifier = move[0], move[1:]
    inverse = {"": face + "'", "'": face, "2": face + "2"}[modifier]
    for state in range(NUM_EDGE_STATES):
        assert move_table.apply(inverse, move_table.apply(move, state)) == state


@pytest.mark.parametrize("move", MOVES)
def test_move_order(move_table, move):
    order = 2 if move.endswith("2") else 4
    for state in range(NUM_EDGE_STATES):
        current = state
        for _ in range(order):
            current = move_table.apply(move, current)
        assert current == state


def test_only_front_and_back_flip(move_table):
    for move_id, move in enumerate(move_table.moves):
        flips = move_table.transitions[move_id] & 1 != np.arange(NUM_EDGE_STATES) & 1
        moved = move_table.transitions[move_id] >> 1 != np.arange(NUM_EDGE_STATES) >> 1
        if move[0] in "FB" and not move.endswith("2"):
            assert np.array_equal(flips, moved)
        else:
            assert not flips.any()


def test_apply_state_matches_step(move_table):
    state = move_table.apply_moves(["R", "U'", "F2"], SOLVED_STATE)
    successors = move_table.step([SOLVED_STATE, state])
    for move_id in range(len(move_table)):
        assert successors[0, move_id] == move_table.apply_state(move_id, SOLVED_STATE)
        assert successors[1, move_id] == move_table.apply_state(move_id, state)


def test_table_matches_sticker_model():
    assert validate_table(build_move_table())
