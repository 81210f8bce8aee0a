"""Errors raised by the grid engine.

Every error is a caller-contract violation raised at the offending call.
Each one also derives from the builtin that describes it best, so code
that catches ``IndexError`` or ``ValueError`` keeps working.
"""


class LifeGameError(Exception):
    """Base class for grid engine errors."""


class InvalidDimensions(LifeGameError, ValueError):
    """Grid dimensions are not positive integers, or grid data is not rectangular."""


class OutOfBounds(LifeGameError, IndexError):
    """A coordinate lies outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} grid")


class SizeMismatch(LifeGameError, ValueError):
    """An export buffer does not hold exactly ``width * height`` cells."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Buffer holds {actual} cells, expected {expected}")
