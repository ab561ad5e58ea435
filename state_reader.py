from cube import Face, outward_faces
from edge_state import EdgeState, CrossState, POSITION_COORDS, COORD_POSITIONS, good_axis
from errors import WrongEdgeCountError, MissingSideEdgeError
from frame import transform_exposure

#the 12 edge cubies, in position code order of an unrotated cube
EDGE_COORDS = list(POSITION_COORDS)


def read_exposures(color_at):
    """Query the provider once per edge cubie: [(coord, six face colors)].

    Only outward faces are read, inner faces always count as no color.
    """
    exposures = []
    for coord in EDGE_COORDS:
        outward = outward_faces(coord)
        colors = [color_at(coord, face) if face in outward else None for face in Face]
        exposures.append((coord, colors))
    return exposures


def axis_colors(coord, colors):
    """Color showing along each axis (x, y, z), None on the axis the edge does not touch."""
    shown = []
    for axis, value in enumerate(coord):
        if value == 0:
            shown.append(None)
            continue
        vector = [0, 0, 0]
        vector[axis] = value
        shown.append(colors[Face.from_vector(vector)])
    return shown


def locate_edge(coord, colors, bottom):
    """(EdgeState, other color) for an edge showing the bottom color, else None."""
    shown = axis_colors(coord, colors)
    if bottom not in shown:
        return None

    other = next((color for color in shown if color is not None and color != bottom), None)
    position = COORD_POSITIONS[tuple(coord)]
    orientation = 0 if shown[good_axis(position)] == bottom else 1
    return EdgeState(position, orientation), other


def read_edges(color_at, frame):
    """Side color -> EdgeState for every edge showing the frame's bottom color."""
    found = []
    for coord, colors in read_exposures(color_at):
        coord, colors = transform_exposure(coord, colors, frame.rotations)
        located = locate_edge(coord, colors, frame.bottom)
        if located is not None:
            found.append(located)

    if len(found) != 4:
        raise WrongEdgeCountError(frame.bottom, len(found))

    edges = {}
    for edge, other in found:
        edges.setdefault(other, edge)
    return edges


def read_cross_state(color_at, frame):
    edges = read_edges(color_at, frame)
    slots = []
    for side in frame.side_order:
        if side not in edges:
            raise MissingSideEdgeError(frame.bottom, side)
        slots.append(edges[side])
    return CrossState(tuple(slots))
