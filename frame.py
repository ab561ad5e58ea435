from dataclasses import dataclass
from enum import Enum
from cube import Color, Face
from errors import ConfigurationError

W, Y, G, R, O, B = (Color.WHITE, Color.YELLOW, Color.GREEN,
                    Color.RED, Color.ORANGE, Color.BLUE)


class Rotation(Enum):
    """Whole cube rotations.

    Each carries where a cubie at (x, y, z) ends up after the rotation and the
    color permutation of its six face slots: new[i] = old[perm[i]], with slots
    in Face order R, L, U, D, F, B.
    """
    X = ("x", lambda x, y, z: (x, z, -y), (0, 1, 4, 5, 3, 2))
    X_PRIME = ("x'", lambda x, y, z: (x, -z, y), (0, 1, 5, 4, 2, 3))
    X2 = ("x2", lambda x, y, z: (x, -y, -z), (0, 1, 3, 2, 5, 4))
    Y = ("y", lambda x, y, z: (-z, y, x), (5, 4, 2, 3, 0, 1))
    Y_PRIME = ("y'", lambda x, y, z: (z, y, -x), (4, 5, 2, 3, 1, 0))
    Y2 = ("y2", lambda x, y, z: (-x, y, -z), (1, 0, 2, 3, 5, 4))
    Z = ("z", lambda x, y, z: (y, -x, z), (2, 3, 1, 0, 4, 5))
    Z_PRIME = ("z'", lambda x, y, z: (-y, x, z), (3, 2, 0, 1, 4, 5))
    Z2 = ("z2", lambda x, y, z: (-x, -y, z), (1, 0, 3, 2, 4, 5))

    def __init__(self, notation, remap, perm):
        self.notation = notation
        self.remap = remap
        self.perm = perm

    def __str__(self):
        return self.notation

    @classmethod
    def from_notation(cls, notation):
        for rotation in cls:
            if rotation.notation == notation:
                return rotation
        raise ValueError(f"{notation} is not a valid Rotation!")

    @property
    def inverse(self):
        return INVERSE_ROTATIONS[self]

    def apply(self, coord, colors):
        new_colors = [colors[self.perm[i]] for i in range(len(Face))]
        return self.remap(*coord), new_colors


INVERSE_ROTATIONS = {
    Rotation.X: Rotation.X_PRIME, Rotation.X_PRIME: Rotation.X, Rotation.X2: Rotation.X2,
    Rotation.Y: Rotation.Y_PRIME, Rotation.Y_PRIME: Rotation.Y, Rotation.Y2: Rotation.Y2,
    Rotation.Z: Rotation.Z_PRIME, Rotation.Z_PRIME: Rotation.Z, Rotation.Z2: Rotation.Z2
}

#bottom color -> (rotation bringing it down, side colors on F R B L afterwards)
#the reference cube is held white-down and green-front, so White needs no rotation
FRAME_CASES = {
    W: ((), (G, O, B, R)),
    Y: ((Rotation.Z2,), (G, R, B, O)),
    O: ((Rotation.Z,), (G, Y, B, W)),
    R: ((Rotation.Z_PRIME,), (G, W, B, Y)),
    G: ((Rotation.X_PRIME,), (Y, O, W, R)),
    B: ((Rotation.X,), (W, O, Y, R))
}

#turn that brings the side at F, R, B or L to the front
FRONT_TURNS = ((), (Rotation.Y,), (Rotation.Y2,), (Rotation.Y_PRIME,))


@dataclass(frozen=True)
class Frame:
    bottom: Color
    front: Color
    rotations: tuple        #whole cube rotations into the solving orientation
    side_order: tuple       #side colors on F, R, B, L once rotated

    @property
    def prefix(self):
        return " ".join(str(rotation) for rotation in self.rotations)


def facing_options(bottom):
    """The four colors that can face front while this color is at the bottom."""
    return list(FRAME_CASES[Color(bottom)][1])


def get_frame(bottom, front):
    bottom, front = Color(bottom), Color(front)
    base_rotations, sides = FRAME_CASES[bottom]
    if front not in sides:
        raise ConfigurationError(bottom, front)

    offset = sides.index(front)
    side_order = sides[offset:] + sides[:offset]
    return Frame(bottom, front, base_rotations + FRONT_TURNS[offset], side_order)


def transform_exposure(coord, colors, rotations):
    """Where a cubie and its six face colors end up after the rotations, in order."""
    coord, colors = tuple(coord), list(colors)
    for rotation in rotations:
        coord, colors = rotation.apply(coord, colors)
    return coord, colors
