import pytest
from config import SOLVED_STATE
from cube import Cube, Color, Face, CUBIES, outward_faces
from errors import ConfigurationError
from frame import Rotation, get_frame, facing_options, transform_exposure
from state_reader import read_cross_state

ALL_PAIRS = [(bottom, front) for bottom in Color for front in facing_options(bottom)]


def test_there_are_24_frames():
    assert len(ALL_PAIRS) == 24
    for bottom, front in ALL_PAIRS:
        assert front != bottom
        assert front != bottom.opposite


@pytest.mark.parametrize("bottom,front", ALL_PAIRS)
def test_solved_cube_reads_solved_in_every_frame(solved_cube, bottom, front):
    frame = get_frame(bottom, front)
    assert len(frame.rotations) <= 2
    assert read_cross_state(solved_cube.color_at, frame).code == SOLVED_STATE


@pytest.mark.parametrize("bottom,front", ALL_PAIRS)
def test_rotations_bring_the_pair_to_bottom_and_front(solved_cube, bottom, front):
    frame = get_frame(bottom, front)
    cube = solved_cube.apply_alg(frame.rotations)
    assert cube.center(Face.D) == bottom
    assert cube.center(Face.F) == front
    assert [cube.center(face) for face in (Face.F, Face.R, Face.B, Face.L)] == list(frame.side_order)


def test_canonical_frame_needs_no_rotation():
    frame = get_frame(Color.WHITE, Color.GREEN)
    assert frame.rotations == ()
    assert frame.prefix == ""
    assert frame.side_order == (Color.GREEN, Color.ORANGE, Color.BLUE, Color.RED)


def test_white_bottom_red_front_is_one_rotation():
    frame = get_frame(Color.WHITE, Color.RED)
    assert frame.rotations == (Rotation.Y_PRIME,)
    assert frame.prefix == "y'"


def test_two_rotation_frame():
    frame = get_frame(Color.GREEN, Color.RED)
    assert frame.prefix == "x' y'"
    assert frame.side_order[0] == Color.RED


@pytest.mark.parametrize("bottom,front", [(Color.WHITE, Color.WHITE),
                                          (Color.WHITE, Color.YELLOW),
                                          (Color.RED, Color.ORANGE),
                                          (Color.BLUE, Color.GREEN)])
def test_bad_pairs_are_configuration_errors(bottom, front):
    with pytest.raises(ConfigurationError) as excinfo:
        get_frame(bottom, front)
    assert excinfo.value.bottom == bottom
    assert excinfo.value.front == front


@pytest.mark.parametrize("rotation", list(Rotation))
def test_rotation_data_matches_sticker_model(solved_cube, rotation):
    cube = solved_cube.apply_alg("R U2 F' L D B2")
    rotated = cube.rotate_cube(rotation)
    for coord in CUBIES:
        colors = [cube.color_at(coord, face) for face in Face]
        new_coord, new_colors = transform_exposure(coord, colors, [rotation])
        for face in outward_faces(new_coord):
            assert new_colors[face] == rotated.color_at(new_coord, face)


@pytest.mark.parametrize("rotation", list(Rotation))
def test_rotation_inverse(rotation):
    coord, colors = (1, -1, 0), list(range(6))
    back = transform_exposure(coord, colors, [rotation, rotation.inverse])
    assert back == (coord, colors)
    assert Rotation.from_notation(str(rotation)) is rotation


def test_unknown_rotation():
    with pytest.raises(ValueError):
        Rotation.from_notation("w")
