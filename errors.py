class CrossSolverError(ValueError):
    """Base class for every failure the cross solver reports."""


class ConfigurationError(CrossSolverError):
    """Bottom and front colors do not describe a valid way to hold the cube."""

    def __init__(self, bottom, front):
        self.bottom = bottom
        self.front = front
        if bottom == front:
            message = f"Bottom and front cannot both be {bottom.label}"
        else:
            message = f"{front.label} is not adjacent to {bottom.label}"
        super().__init__(message)


class InputConsistencyError(CrossSolverError):
    """The sticker coloring cannot hold a cross of the requested color."""


class WrongEdgeCountError(InputConsistencyError):
    """The bottom color does not show on exactly four edges."""

    def __init__(self, color, count):
        self.color = color
        self.count = count
        super().__init__(f"Found {count} edges with {color.label}, need 4")


class MissingSideEdgeError(InputConsistencyError):
    """No bottom color edge carries one of the four side colors."""

    def __init__(self, color, side):
        self.color = color
        self.side = side
        super().__init__(f"No {color.label} edge with a {side.label} side")


class UnsolvableError(CrossSolverError):
    def __init__(self, max_depth):
        self.max_depth = max_depth
        super().__init__(f"No solution within {max_depth + 1} moves")
