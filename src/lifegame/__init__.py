"""Conway's Game of Life grid engine with a terminal driver."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.errors import LifeGameError, InvalidDimensions, OutOfBounds, SizeMismatch
from .core.grid import Grid
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "Grid",
    "Pattern",
    "PatternLibrary",
    "LifeGameError",
    "InvalidDimensions",
    "OutOfBounds",
    "SizeMismatch",
]
