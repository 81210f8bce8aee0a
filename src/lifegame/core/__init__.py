"""Core cellular automata logic."""

from .cell import Cell
from .errors import LifeGameError, InvalidDimensions, OutOfBounds, SizeMismatch
from .grid import Grid
from .patterns import Pattern, PatternLibrary

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
