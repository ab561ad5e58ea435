from config import NO_MOVE_TEXT, NO_SCRAMBLE_TEXT
from cube import split_move


def parse_alg(alg):
    """'R U2 F' or ['R', 'U2', 'F'] -> ['R', 'U2', 'F'], checking every token"""
    moves = alg.split() if isinstance(alg, str) else [str(move) for move in alg]
    for move in moves:
        split_move(move)
    return moves


def get_opposite_move(move):
    move = str(move)
    if move.endswith("'"):
        return move[:-1]
    elif move.endswith("2"):
        return move
    else:
        return move + "'"


def invert_alg(alg):
    """Undo an alg: reverse it and invert every move. Empty alg -> ''"""
    moves = parse_alg(alg) if alg else []
    return " ".join(get_opposite_move(move) for move in reversed(moves))


def format_solution(path, rotations=()):
    prefix = " ".join(str(rotation) for rotation in rotations)
    moves = " ".join(path) if path else NO_MOVE_TEXT
    return f"({prefix}) {moves}" if prefix else moves


def generate_scramble(path, rotations=()):
    if not path:
        return NO_SCRAMBLE_TEXT
    prefix = " ".join(str(rotation) for rotation in rotations)
    scramble = invert_alg(path)
    return f"{prefix} {scramble}" if prefix else scramble
