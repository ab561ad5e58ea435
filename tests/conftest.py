import os
import sys
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cube import Cube
from transition_table import get_move_table


@pytest.fixture
def solved_cube():
    return Cube.solved()


@pytest.fixture(scope="session")
def move_table():
    return get_move_table()
