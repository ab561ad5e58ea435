import threading
import time
from dataclasses import dataclass
import numpy as np
from config import NUM_EDGE_STATES, SLOT_BITS, SLOT_MASK
from cube import Cube, Color, Face
from edge_state import EdgeState, POSITION_COORDS, COORD_POSITIONS, good_axis
from util import format_time

#clockwise quarter turn of each face over the 12 edge slots: (4-cycle, flips orientation)
BASE_MOVES = {
    "F": ([8, 4, 0, 7], 1),
    "B": ([10, 6, 2, 5], 1),
    "R": ([9, 5, 1, 4], 0),
    "L": ([11, 7, 3, 6], 0),
    "U": ([8, 11, 10, 9], 0),
    "D": ([0, 1, 2, 3], 0)
}

FACE_INDEX = {"R": 0, "L": 1, "U": 2, "D": 3, "F": 4, "B": 5}

#B moves go last so that equal length solutions found earlier avoid the back face
MOVES = ["R", "L", "U", "D", "F",
         "R'", "L'", "U'", "D'", "F'",
         "R2", "L2", "U2", "D2", "F2",
         "B", "B'", "B2"]

TIMES = {"": 1, "'": 3, "2": 2}


def base_transition(face):
    """Map every edge slot to (slot after one clockwise turn, orientation flip)."""
    cycle, flip = BASE_MOVES[face]
    transition = [(pos, 0) for pos in range(len(POSITION_COORDS))]
    for i, pos in enumerate(cycle):
        transition[pos] = (cycle[(i + 1) % len(cycle)], flip)
    return transition


@dataclass(frozen=True, eq=False)
class MoveTable:
    transitions: np.ndarray     #(moves, 24) next edge state
    moves: tuple                #display name of each move index
    move_faces: np.ndarray      #face index of each move, for same-face pruning

    def __len__(self):
        return len(self.moves)

    def index(self, move):
        return self.moves.index(move)

    def apply(self, move, edge_code):
        if isinstance(move, str):
            move = self.index(move)
        return int(self.transitions[move, edge_code])

    def apply_state(self, move, state):
        """Turn all four packed edge states of a cross state at once."""
        if isinstance(move, str):
            move = self.index(move)
        row = self.transitions[move]
        next_state = 0
        for slot in range(4):
            shift = SLOT_BITS * slot
            next_state |= int(row[(state >> shift) & SLOT_MASK]) << shift
        return next_state

    def apply_moves(self, moves, state):
        for move in moves:
            state = self.apply_state(move, state)
        return state

    def step(self, states):
        """Every successor of every state: (len(states), moves) array of packed states."""
        states = np.asarray(states, dtype=np.int64)
        table = self.transitions.astype(np.int64)
        next_states = np.zeros((len(states), len(self.moves)), dtype=np.int64)
        for slot in range(4):
            shift = SLOT_BITS * slot
            next_states |= table[:, (states >> shift) & SLOT_MASK].T << shift
        return next_states


def build_move_table(moves=MOVES):
    transitions = np.zeros((len(moves), NUM_EDGE_STATES), dtype=np.uint8)
    move_faces = np.zeros(len(moves), dtype=np.int8)

    for move_id, move in enumerate(moves):
        face_name, modifier = move[0], move[1:]
        base = base_transition(face_name)
        move_faces[move_id] = FACE_INDEX[face_name]

        for state in range(NUM_EDGE_STATES):
            pos, ori = state >> 1, state & 1
            for _ in range(TIMES[modifier]):
                pos, flip = base[pos]
                ori ^= flip
            transitions[move_id, state] = (pos << 1) | ori

    transitions.setflags(write=False)
    move_faces.setflags(write=False)
    return MoveTable(transitions, tuple(moves), move_faces)


_move_table = None
_move_table_lock = threading.Lock()


def get_move_table():
    """Build the table on first use, then hand out the same read-only instance."""
    global _move_table
    if _move_table is None:
        with _move_table_lock:
            if _move_table is None:
                _move_table = build_move_table()
    return _move_table


def place_edge(edge):
    """Cube with only one marked edge: Color.WHITE on its tracked sticker."""
    coord = POSITION_COORDS[edge.position]
    axes = [axis for axis, value in enumerate(coord) if value != 0]
    axis = good_axis(edge.position)
    if edge.orientation:
        axis = next(a for a in axes if a != axis)
    other = next(a for a in axes if a != axis)

    def face_on(a):
        vector = [0, 0, 0]
        vector[a] = coord[a]
        return Face.from_vector(vector)

    cube = Cube({key: None for key in Cube().stickers})
    cube = cube.paint(coord, face_on(axis), Color.WHITE)
    return cube.paint(coord, face_on(other), Color.GREEN)


def find_edge(cube):
    for (coord, face), color in cube.stickers.items():
        if color == Color.WHITE:
            position = COORD_POSITIONS[coord]
            return EdgeState(position, 0 if face.axis == good_axis(position) else 1)
    raise ValueError("Marked edge went missing!")


def validate_table(table=None, verbose=False):
    ###Verify that every transition matches a turn of the sticker model###
    if table is None:
        table = get_move_table()
    if verbose:
        print("\nValidating move table...")
    start_time = time.time()
    errors = 0

    for code in range(NUM_EDGE_STATES):
        edge = EdgeState.from_code(code)
        cube = place_edge(edge)
        for move_id, move in enumerate(table.moves):
            expected = find_edge(cube.turn(move)).code
            actual = table.apply(move_id, code)
            if expected != actual:
                errors += 1
                if verbose and errors <= 5:
                    print(f"ERROR: Edge {edge}, Move {move}: table {actual}, cube {expected}")

    if errors == 0:
        if verbose:
            print(f" Validation passed - all transitions correct! ({format_time(time.time() - start_time)})")
    else:
        if verbose:
            print(f" Validation failed - {errors} errors found!")
        raise ValueError("Move table validation failed")
    return True


if __name__ == "__main__":
    validate_table(verbose=True)
