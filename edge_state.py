from dataclasses import dataclass
from config import SOLVED_STATE, SLOT_BITS, SLOT_MASK, NUM_SLOTS, NUM_EDGE_STATES

#edge slots: bottom ring 0-3, equatorial ring 4-7, top ring 8-11
POSITION_NAMES = ["DF", "DR", "DB", "DL",
                  "FR", "BR", "BL", "FL",
                  "UF", "UR", "UB", "UL"]

POSITION_COORDS = [
    (0, -1, 1), (1, -1, 0), (0, -1, -1), (-1, -1, 0),
    (1, 0, 1), (1, 0, -1), (-1, 0, -1), (-1, 0, 1),
    (0, 1, 1), (1, 1, 0), (0, 1, -1), (-1, 1, 0)
]
COORD_POSITIONS = {coord: code for code, coord in enumerate(POSITION_COORDS)}

BOTTOM_RING = range(0, 4)
EQUATOR_RING = range(4, 8)
TOP_RING = range(8, 12)


def good_axis(position):
    """Axis the bottom color must face for an edge in this slot to count as oriented.

    Bottom and top ring edges want it on y, equatorial edges on z, so U, D, R
    and L turns never change the flag while F and B turns always do.
    """
    return 2 if position in EQUATOR_RING else 1


@dataclass(frozen=True)
class EdgeState:
    position: int
    orientation: int = 0

    def __post_init__(self):
        if not 0 <= self.position < len(POSITION_NAMES):
            raise ValueError(f"{self.position} is not a valid edge position!")
        if self.orientation not in (0, 1):
            raise ValueError(f"{self.orientation} is not a valid edge orientation!")

    @property
    def code(self):
        return (self.position << 1) | self.orientation

    @classmethod
    def from_code(cls, code):
        if not 0 <= code < NUM_EDGE_STATES:
            raise ValueError(f"{code} is not a valid edge state!")
        return cls(code >> 1, code & 1)

    @property
    def coord(self):
        return POSITION_COORDS[self.position]

    @property
    def name(self):
        return POSITION_NAMES[self.position] + ("'" if self.orientation else "")

    def __str__(self):
        return self.name


def pack_codes(codes):
    state = 0
    for slot, code in enumerate(codes):
        state |= code << (SLOT_BITS * slot)
    return state


def unpack_codes(state):
    return [(state >> (SLOT_BITS * slot)) & SLOT_MASK for slot in range(NUM_SLOTS)]


@dataclass(frozen=True)
class CrossState:
    """The four tracked cross edges, slot i holding the i-th side color in frame order."""
    edges: tuple

    def __post_init__(self):
        object.__setattr__(self, "edges", tuple(self.edges))
        if len(self.edges) != NUM_SLOTS:
            raise ValueError(f"A cross state tracks {NUM_SLOTS} edges, got {len(self.edges)}")

    @classmethod
    def from_code(cls, state):
        if not 0 <= state < 1 << (SLOT_BITS * NUM_SLOTS):
            raise ValueError(f"{state} is not a valid cross state!")
        return cls(tuple(EdgeState.from_code(code) for code in unpack_codes(state)))

    @property
    def code(self):
        return pack_codes(edge.code for edge in self.edges)

    def __int__(self):
        return self.code

    def position(self, slot):
        return self.edges[slot].position

    def orientation(self, slot):
        return self.edges[slot].orientation

    @property
    def is_solved(self):
        return self.code == SOLVED_STATE

    @property
    def is_legal(self):
        return len({edge.position for edge in self.edges}) == NUM_SLOTS

    def __str__(self):
        return " ".join(edge.name for edge in self.edges)


SOLVED_CROSS = CrossState.from_code(SOLVED_STATE)
