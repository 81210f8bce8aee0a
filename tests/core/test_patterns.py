"""Tests for the Pattern and PatternLibrary classes."""

from lifegame.core.cell import Cell
from lifegame.core.grid import Grid
from lifegame.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_apply_to_grid(self):
        """Test applying pattern to grid."""
        grid = Grid(10, 10)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        pattern.apply_to_grid(grid)

        assert grid.get_cell(0, 0) is Cell.ALIVE
        assert grid.get_cell(1, 0) is Cell.ALIVE
        assert grid.get_cell(2, 0) is Cell.ALIVE
        assert grid.get_cell(0, 1) is Cell.DEAD
        assert grid.population == 3

    def test_apply_to_grid_with_offset(self):
        """Test applying pattern with offset clears the old cells."""
        grid = Grid(10, 10)
        grid.set_cell(0, 0, Cell.ALIVE)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        pattern.apply_to_grid(grid, offset_x=5, offset_y=3)

        assert grid.get_cell(5, 3) is Cell.ALIVE
        assert grid.get_cell(6, 3) is Cell.ALIVE
        assert grid.get_cell(7, 3) is Cell.ALIVE
        assert grid.get_cell(0, 0) is Cell.DEAD
        assert grid.population == 3

    def test_apply_to_grid_without_clearing(self):
        """Test stamping a pattern on top of existing cells."""
        grid = Grid(10, 10)
        grid.set_cell(9, 9, Cell.ALIVE)

        Pattern("Dot", [(0, 0)]).apply_to_grid(grid, clear=False)

        assert grid.get_cell(9, 9) is Cell.ALIVE
        assert grid.population == 2

    def test_apply_to_grid_out_of_bounds(self):
        """Test cells past the edge are skipped, even on a torus."""
        for wrap_edges in (True, False):
            grid = Grid(3, 3, wrap_edges=wrap_edges)
            pattern = Pattern("Test", [(0, 0), (1, 0), (2, 0), (3, 0)])

            pattern.apply_to_grid(grid)

            assert grid.population == 3
            assert grid.get_cell(0, 0) is Cell.ALIVE

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)
        assert Pattern("Single", [(5, 3)]).get_bounding_box() == (5, 3, 5, 3)

        cells = [(1, 2), (3, 1), (0, 4), (2, 0)]
        assert Pattern("Multi", cells).get_bounding_box() == (0, 0, 3, 4)

    def test_get_size(self):
        """Test pattern size calculation."""
        assert Pattern("Single", [(5, 3)]).get_size() == (1, 1)

        cells = [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1)]
        assert Pattern("Rectangle", cells).get_size() == (3, 2)

    def test_normalize(self):
        """Test pattern normalization."""
        pattern = Pattern("Offset", [(5, 3), (6, 3), (7, 3)], "moved")
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 0), (2, 0)]
        assert normalized.name == "Offset"
        assert normalized.description == "moved"
        assert pattern.cells == [(5, 3), (6, 3), (7, 3)]

        assert Pattern("Empty", []).normalize().cells == []

    def test_from_grid(self):
        """Test pattern creation from grid in row-major order."""
        grid = Grid(5, 5)
        grid.set_cell(3, 1, Cell.ALIVE)
        grid.set_cell(1, 1, Cell.ALIVE)
        grid.set_cell(2, 0, Cell.ALIVE)

        pattern = Pattern.from_grid(grid, "From Grid", "Test pattern")

        assert pattern.name == "From Grid"
        assert pattern.description == "Test pattern"
        assert pattern.cells == [(2, 0), (1, 1), (3, 1)]

    def test_from_string(self):
        """Test pattern creation from a picture."""
        pattern = Pattern.from_string("Glider", ".*.\n..*\n***")
        assert pattern.cells == [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test that built-in patterns are loaded."""
        library = PatternLibrary()
        patterns = library.list_patterns()

        for name in ("Block", "Blinker", "Glider", "Pulsar", "R-pentomino"):
            assert name in patterns

        block = library.get_pattern("Block")
        assert len(block.cells) == 4
        assert block.get_size() == (2, 2)

    def test_get_unknown_pattern(self):
        """Test unknown names return None."""
        assert PatternLibrary().get_pattern("Nope") is None

    def test_add_pattern(self):
        """Test custom patterns are stored and categorized."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Dot", [(0, 0)]))

        assert library.get_pattern("Dot").cells == [(0, 0)]
        assert library.get_patterns_by_category()["Custom"] == ["Dot"]

    def test_categories(self):
        """Test category grouping leaves out empty categories."""
        categories = PatternLibrary().get_patterns_by_category()

        assert "Custom" not in categories
        assert categories["Oscillators"] == ["Blinker", "Toad", "Beacon", "Pulsar"]
        assert "Glider" in categories["Spaceships"]

    def test_pulsar_shape(self):
        """Test the pulsar is symmetric and has period 3."""
        pulsar = PatternLibrary().get_pattern("Pulsar")
        assert len(pulsar.cells) == 48
        assert pulsar.get_size() == (13, 13)

        cells = set(pulsar.cells)
        assert cells == {(12 - x, y) for x, y in cells}
        assert cells == {(x, 12 - y) for x, y in cells}

        grid = Grid(17, 17)
        pulsar.apply_to_grid(grid, 2, 2)
        start = grid.to_list()

        grid.next()
        assert grid.to_list() != start
        grid.next()
        grid.next()
        assert grid.to_list() == start

    def test_period_two_oscillators(self):
        """Test the period-2 oscillators return after two generations."""
        library = PatternLibrary()
        for name in ("Blinker", "Toad", "Beacon"):
            grid = Grid(10, 10)
            library.get_pattern(name).apply_to_grid(grid, 3, 3)
            start = grid.to_list()

            grid.next()
            grid.next()
            assert grid.to_list() == start, name
