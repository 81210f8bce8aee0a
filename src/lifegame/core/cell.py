"""Cell states for the Game of Life grid."""

from enum import IntEnum


class Cell(IntEnum):
    """State of a single cell.

    The integer values double as the snapshot encoding written by
    ``Grid.fill_cells``.
    """

    DEAD = 0
    ALIVE = 1

    def __str__(self) -> str:
        return "*" if self is Cell.ALIVE else "."
