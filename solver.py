from dataclasses import dataclass, field
import numpy as np
from config import MAX_DEPTH, SOLVED_STATE, STATE_SPACE, SLOT_BITS, SLOT_MASK, INVALID_PREFIX
from edge_state import CrossState
from errors import CrossSolverError, UnsolvableError
from frame import get_frame
from scramble import format_solution, generate_scramble, invert_alg
from state_reader import read_cross_state
from transition_table import get_move_table


def count_back_moves(path):
    """Default tie-break: the back face is the awkward one to watch on screen."""
    return sum(1 for move in path if move.startswith("B"))


@dataclass
class SearchResult:
    start: int
    solutions: list = field(default_factory=list)   #every minimal path, best first
    depth: int = 0                                  #layers expanded
    explored: int = 0                               #states marked visited

    @property
    def found(self):
        return len(self.solutions) > 0

    @property
    def best(self):
        return self.solutions[0] if self.solutions else None


def walk_back(parents, start, parent, move):
    """Follow parent links from a solution's last move back to the start."""
    path = [move]
    current = parent
    while current != start:
        packed = int(parents[current])
        path.append(packed & SLOT_MASK)
        current = packed >> SLOT_BITS
    path.reverse()
    return path


def new_buffers():
    """Visited flags and packed (parent << 5 | move) links for one search at a time."""
    return np.zeros(STATE_SPACE, dtype=np.uint8), np.zeros(STATE_SPACE, dtype=np.uint32)


def search(start, table=None, max_depth=MAX_DEPTH, goal=SOLVED_STATE, scorer=count_back_moves,
           buffers=None):
    """Breadth first search from start to goal over packed cross states.

    Layers 0..max_depth are expanded, so returned paths have at most
    max_depth + 1 moves. Every solution of the first layer that reaches the
    goal is kept and the list is stably sorted by scorer.

    buffers is an optional (visited, parents) pair from new_buffers(), cleared
    here before use so repeated searches skip the allocation. A pair must not
    be shared by two searches running at the same time.
    """
    if table is None:
        table = get_move_table()
    start = int(start)
    result = SearchResult(start)
    if start == goal:
        result.solutions.append(())
        return result

    if buffers is None:
        visited, parents = new_buffers()
    else:
        visited, parents = buffers
        visited.fill(0)
        parents.fill(0)
    move_faces = np.asarray(table.move_faces, dtype=np.int64)

    visited[start] = 1
    frontier = np.array([start], dtype=np.int64)
    last_faces = np.array([-1], dtype=np.int64)
    candidates = []

    for depth in range(max_depth + 1):
        if frontier.size == 0:
            break
        result.depth = depth + 1
        next_states = table.step(frontier)
        #turning the face that was just turned is never useful
        allowed = move_faces[np.newaxis, :] != last_faces[:, np.newaxis]

        rows, cols = np.nonzero(allowed & (next_states == goal))
        for row, move in zip(rows, cols):
            candidates.append((int(frontier[row]), int(move)))
        if candidates:
            break

        rows, cols = np.nonzero(allowed & (visited[next_states] == 0))
        states = next_states[rows, cols]
        #first discovery wins, in frontier then move order
        _, first = np.unique(states, return_index=True)
        first = np.sort(first)
        rows, cols, states = rows[first], cols[first], states[first]

        visited[states] = 1
        parents[states] = (frontier[rows] << SLOT_BITS) | cols
        result.explored += len(states)
        frontier = states
        last_faces = move_faces[cols]

    paths = [tuple(table.moves[m] for m in walk_back(parents, start, parent, move))
             for parent, move in candidates]
    result.solutions = sorted(paths, key=scorer)
    return result


@dataclass
class SolveResult:
    frame: object
    start: CrossState
    path: tuple
    solutions: list

    @property
    def rotations(self):
        return tuple(str(rotation) for rotation in self.frame.rotations)

    @property
    def prefix(self):
        return self.frame.prefix

    @property
    def solution_str(self):
        return format_solution(self.path, self.rotations)

    @property
    def scramble(self):
        return generate_scramble(self.path, self.rotations)

    @property
    def player_alg(self):
        """Rotation prefix then the solution, as the animation plays it."""
        return " ".join(self.rotations + self.path)

    @property
    def player_setup(self):
        """Alg that takes a solved cross back to the state being solved."""
        parts = [self.prefix, invert_alg(self.path), invert_alg(self.rotations)]
        return " ".join(part for part in parts if part)


def solve_cross(color_at, bottom, front, table=None, max_depth=MAX_DEPTH, scorer=count_back_moves,
                buffers=None):
    frame = get_frame(bottom, front)
    start = read_cross_state(color_at, frame)
    result = search(start, table=table, max_depth=max_depth, scorer=scorer, buffers=buffers)
    if not result.found:
        raise UnsolvableError(max_depth)
    return SolveResult(frame, start, result.best, result.solutions)


def get_solve_str(color_at, bottom, front, **kwargs):
    try:
        return solve_cross(color_at, bottom, front, **kwargs).solution_str
    except CrossSolverError as e:
        return INVALID_PREFIX + str(e)
