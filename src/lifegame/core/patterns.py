"""Common Conway's Game of Life patterns for seeding a grid."""

from typing import Dict, List, Tuple, Optional

from .cell import Cell
from .errors import OutOfBounds
from .grid import Grid


class Pattern:
    """A named set of living cells, positioned relative to (0, 0)."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    @classmethod
    def from_string(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Create a pattern from a text picture (see ``Grid.from_string``)."""
        return cls.from_grid(Grid.from_string(text), name, description)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create a pattern from the living cells of a grid."""
        cells = [
            (x, y)
            for y in range(grid.height)
            for x in range(grid.width)
            if grid.get_cell(x, y) is Cell.ALIVE
        ]
        return cls(name, cells, description)

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0, clear: bool = True) -> None:
        """Write this pattern into a grid.

        Cells that land outside the grid are skipped.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset
            clear: Whether to kill every other cell first
        """
        if clear:
            grid.clear()
        for x, y in self.cells:
            try:
                grid.set_cell(x + offset_x, y + offset_y, Cell.ALIVE)
            except OutOfBounds:
                pass

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern as (min_x, min_y, max_x, max_y)."""
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        return Pattern(self.name, [(x - min_x, y - min_y) for x, y in self.cells], self.description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


def _pulsar_cells() -> List[Tuple[int, int]]:
    # One quadrant, mirrored across both axes of the 13x13 box
    quadrant = [(2, 0), (3, 0), (4, 0), (0, 2), (0, 3), (0, 4), (5, 2), (5, 3), (5, 4), (2, 5), (3, 5), (4, 5)]
    cells = set()
    for x, y in quadrant:
        cells.update({(x, y), (12 - x, y), (x, 12 - y), (12 - x, 12 - y)})
    return sorted(cells, key=lambda cell: (cell[1], cell[0]))


_CATEGORIES = {
    "Still Life": ["Block", "Beehive", "Loaf"],
    "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
    "Spaceships": ["Glider", "Lightweight Spaceship"],
    "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
}


class PatternLibrary:
    """In-memory collection of named patterns, preloaded with the classics."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        builtins = [
            Pattern("Block", [(0, 0), (1, 0), (0, 1), (1, 1)], "2x2 still life block"),
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life"),
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life"),
            Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"),
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator"),
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator"),
            Pattern("Pulsar", _pulsar_cells(), "Period-3 oscillator"),
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4"),
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            ),
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Methuselah that stabilizes after 1103 generations",
            ),
            Pattern("Diehard", [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)], "Dies after 130 generations"),
            Pattern("Acorn", [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)], "Stabilizes after 5206 generations"),
        ]
        for pattern in builtins:
            self.add_pattern(pattern)

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if it is unknown."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category.

        Patterns added at runtime go under "Custom". Empty categories are
        left out.
        """
        categories = {name: list(patterns) for name, patterns in _CATEGORIES.items()}
        builtin = {name for patterns in _CATEGORIES.values() for name in patterns}
        categories["Custom"] = [name for name in self._patterns if name not in builtin]

        return {category: names for category, names in categories.items() if names}
