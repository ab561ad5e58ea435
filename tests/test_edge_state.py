import pytest
from config import SOLVED_STATE
from edge_state import (EdgeState, CrossState, SOLVED_CROSS, POSITION_COORDS,
                        COORD_POSITIONS, good_axis, pack_codes, unpack_codes)


def test_edge_code_packing():
    assert EdgeState(0, 0).code == 0
    assert EdgeState(5, 1).code == 11
    assert EdgeState.from_code(23) == EdgeState(11, 1)
    assert str(EdgeState(4, 1)) == "FR'"


def test_edge_state_bounds():
    with pytest.raises(ValueError):
        EdgeState(12, 0)
    with pytest.raises(ValueError):
        EdgeState(3, 2)
    with pytest.raises(ValueError):
        EdgeState.from_code(24)


def test_solved_constant():
    assert SOLVED_STATE == 200768
    assert SOLVED_CROSS.is_solved
    assert [SOLVED_CROSS.position(slot) for slot in range(4)] == [0, 1, 2, 3]
    assert [SOLVED_CROSS.orientation(slot) for slot in range(4)] == [0, 0, 0, 0]
    assert str(SOLVED_CROSS) == "DF DR DB DL"


def test_cross_state_round_trip():
    state = CrossState((EdgeState(9, 1), EdgeState(0, 0), EdgeState(6, 1), EdgeState(3, 0)))
    assert CrossState.from_code(state.code) == state
    assert int(state) == state.code
    assert unpack_codes(state.code) == [19, 0, 13, 6]
    assert pack_codes([19, 0, 13, 6]) == state.code
    assert state.is_legal
    assert not state.is_solved


def test_cross_state_needs_four_edges():
    with pytest.raises(ValueError):
        CrossState((EdgeState(0, 0),))
    repeated = CrossState((EdgeState(0, 0), EdgeState(0, 1), EdgeState(2, 0), EdgeState(3, 0)))
    assert not repeated.is_legal


def test_position_table_covers_all_edges():
    assert len(set(POSITION_COORDS)) == 12
    for coord in POSITION_COORDS:
        assert sum(abs(c) for c in coord) == 2
    assert COORD_POSITIONS[(1, 0, 1)] == 4
    assert [good_axis(p) for p in (0, 4, 8)] == [1, 2, 1]
