from enum import IntEnum
from config import COLOR_LETTERS, COLOR_NAMES, COLOR_HEX


class Color(IntEnum):
    WHITE = 0
    YELLOW = 1
    GREEN = 2
    RED = 3
    ORANGE = 4
    BLUE = 5

    @property
    def letter(self):
        return COLOR_LETTERS[self]

    @property
    def label(self):
        return COLOR_NAMES[self]

    @property
    def opposite(self):
        return OPPOSITE_COLORS[self]

    @classmethod
    def from_letter(cls, letter):
        if letter not in COLOR_LETTERS or len(letter) != 1:
            raise ValueError(f"{letter} is not a valid Color!")
        return cls(COLOR_LETTERS.index(letter))

    @classmethod
    def from_hex(cls, hex_value):
        """Map a painted hex value to a color, None for the black core."""
        color_id = COLOR_HEX.get(hex_value)
        return None if color_id is None else cls(color_id)


class Face(IntEnum):
    """Outward face directions, in the slot order of a cubie's six faces."""
    R = 0
    L = 1
    U = 2
    D = 3
    F = 4
    B = 5

    @property
    def vector(self):
        return FACE_VECTORS[self]

    @property
    def axis(self):
        return next(i for i, v in enumerate(FACE_VECTORS[self]) if v != 0)

    @classmethod
    def from_vector(cls, vector):
        return VECTOR_FACES[tuple(vector)]


OPPOSITE_COLORS = {
    Color.WHITE: Color.YELLOW, Color.YELLOW: Color.WHITE,
    Color.GREEN: Color.BLUE, Color.BLUE: Color.GREEN,
    Color.RED: Color.ORANGE, Color.ORANGE: Color.RED
}

FACE_VECTORS = {
    Face.R: (1, 0, 0),
    Face.L: (-1, 0, 0),
    Face.U: (0, 1, 0),
    Face.D: (0, -1, 0),
    Face.F: (0, 0, 1),
    Face.B: (0, 0, -1)
}
VECTOR_FACES = {v: k for k, v in FACE_VECTORS.items()}

#reference coloring, held white-down and green-front
FACE_COLORS = {
    Face.U: Color.YELLOW,
    Face.D: Color.WHITE,
    Face.F: Color.GREEN,
    Face.B: Color.BLUE,
    Face.R: Color.ORANGE,
    Face.L: Color.RED
}

CUBIES = [(x, y, z) for x in (-1, 0, 1) for y in (-1, 0, 1) for z in (-1, 0, 1)
          if (x, y, z) != (0, 0, 0)]

#clockwise quarter turn of each face as seen from outside it: (axis, layer, remap)
TURNS = {
    "R": (0, 1, lambda x, y, z: (x, z, -y)),
    "L": (0, -1, lambda x, y, z: (x, -z, y)),
    "U": (1, 1, lambda x, y, z: (-z, y, x)),
    "D": (1, -1, lambda x, y, z: (z, y, -x)),
    "F": (2, 1, lambda x, y, z: (y, -x, z)),
    "B": (2, -1, lambda x, y, z: (-y, x, z))
}

#whole cube rotations follow the face they are named after: x like R, y like U, z like F
ROTATION_FACES = {"x": "R", "y": "U", "z": "F"}

QUARTER_TURNS = {"": 1, "'": 3, "2": 2}


def outward_faces(coord):
    return [face for face in Face if any(c != 0 and c == v for c, v in zip(coord, face.vector))]


def solved_stickers(face_colors):
    return {(coord, face): face_colors[face]
            for coord in CUBIES for face in outward_faces(coord)}


def split_move(move):
    """'R2' -> ('R', 2), "x'" -> ('x', 3)"""
    name, modifier = move[:1], move[1:]
    if (name not in TURNS and name not in ROTATION_FACES) or modifier not in QUARTER_TURNS:
        raise ValueError(f"{move} is not a valid Move!")
    return name, QUARTER_TURNS[modifier]


class Cube:
    """Sticker model of a 3x3x3 cube, usable as a sticker color provider.

    Stickers are keyed by (coord, Face) and only exist on outward faces, so
    color_at returns None for every inner face of a cubie.
    """

    def __init__(self, stickers=None):
        if stickers is None:
            stickers = solved_stickers(FACE_COLORS)
        self.stickers = dict(stickers)

    @classmethod
    def solved(cls, face_colors=None):
        return cls(solved_stickers(face_colors or FACE_COLORS))

    def color_at(self, coord, face):
        return self.stickers.get((tuple(coord), Face(face)))

    def paint(self, coord, face, color):
        key = (tuple(coord), Face(face))
        if key not in self.stickers:
            raise ValueError(f"{Face(face).name} of {tuple(coord)} is not a sticker!")
        new_stickers = dict(self.stickers)
        new_stickers[key] = color
        return Cube(new_stickers)

    def copy(self):
        return Cube(self.stickers)

    def _remap(self, remap, layer=None):
        axis, value = layer if layer is not None else (None, None)
        new_stickers = {}
        for (coord, face), color in self.stickers.items():
            if axis is None or coord[axis] == value:
                coord = remap(*coord)
                face = Face.from_vector(remap(*face.vector))
            new_stickers[(coord, face)] = color
        return Cube(new_stickers)

    def turn(self, move):
        name, times = split_move(move)
        if name in ROTATION_FACES:
            return self.rotate_cube(move)
        axis, value, remap = TURNS[name]
        new_cube = self
        for _ in range(times):
            new_cube = new_cube._remap(remap, (axis, value))
        return new_cube

    def rotate_cube(self, rotation):
        name, times = split_move(str(rotation))
        if name not in ROTATION_FACES:
            raise ValueError(f"{rotation} is not a valid Rotation!")
        remap = TURNS[ROTATION_FACES[name]][2]
        new_cube = self
        for _ in range(times):
            new_cube = new_cube._remap(remap)
        return new_cube

    def apply_alg(self, alg):
        moves = alg.split() if isinstance(alg, str) else alg
        new_cube = self
        for move in moves:
            new_cube = new_cube.turn(str(move))
        return new_cube

    def center(self, face):
        return self.color_at(Face(face).vector, face)

    def cross_solved(self, color):
        """True when the D face carries a finished cross of the given color."""
        if self.center(Face.D) != color:
            return False
        for side in (Face.F, Face.R, Face.B, Face.L):
            coord = tuple(a + b for a, b in zip(side.vector, Face.D.vector))
            if self.color_at(coord, Face.D) != color:
                return False
            if self.color_at(coord, side) != self.center(side):
                return False
        return True

    def __eq__(self, other):
        return isinstance(other, Cube) and self.stickers == other.stickers

    def __repr__(self):
        faces = []
        for face in Face:
            stickers = [self.color_at(coord, face) for coord in CUBIES if face in outward_faces(coord)]
            faces.append(face.name + ":" + "".join(s.letter if s is not None else "." for s in stickers))
        return f"Cube({' '.join(faces)})"
