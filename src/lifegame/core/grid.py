"""Grid engine for Conway's Game of Life."""

from typing import Any, Iterable, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell
from .errors import InvalidDimensions, OutOfBounds, SizeMismatch

ALIVE_CHARS = "*O#"
DEAD_CHARS = ".-"


def _check_dimension(name: str, value: Any) -> int:
    """Validate a grid dimension and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensions(f"{name} must be positive, got {value}")
    return int(value)


class Grid:
    """Fixed-size 2D grid that owns the cell states of one simulation.

    Cells are stored row-major in a numpy array of shape ``(height, width)``,
    so cell ``(x, y)`` lives at flat index ``y * width + x``. The grid is
    toroidal by default; pass ``wrap_edges=False`` to treat everything past
    the border as dead instead.

    Callers only ever receive copies of the cell data, either through
    ``fill_cells`` into their own buffer or through ``snapshot``/``cells``.
    """

    def __init__(self, width: int, height: int, wrap_edges: bool = True) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows
            wrap_edges: Whether edges wrap around (toroidal topology)

        Raises:
            InvalidDimensions: If width or height is not a positive integer
        """
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._wrap_edges = bool(wrap_edges)
        self._cells = np.zeros((self._height, self._width), dtype=np.int8)

        # The engine never parallelizes a generation internally
        torch.set_num_threads(1)

        # Reused for every neighbor count
        self._torch_input = torch.zeros(1, 1, self._height, self._width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def create(cls, width: int, height: int, wrap_edges: bool = True) -> "Grid":
        """Create an all-dead grid. Same as calling the constructor."""
        return cls(width, height, wrap_edges=wrap_edges)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]], wrap_edges: bool = True) -> "Grid":
        """Create a grid from rows of cell values.

        Args:
            rows: Rectangular sequence of rows; each value is a ``Cell`` or
                anything truthy (alive) or falsy (dead)
            wrap_edges: Whether edges wrap around

        Returns:
            New grid holding the given cells

        Raises:
            InvalidDimensions: If there are no rows, rows are empty, or rows
                differ in length
        """
        data = [[1 if value else 0 for value in row] for row in rows]
        if not data or not data[0]:
            raise InvalidDimensions("Grid data must contain at least one non-empty row")

        width = len(data[0])
        for y, row in enumerate(data):
            if len(row) != width:
                raise InvalidDimensions(f"Row {y} has {len(row)} cells, expected {width}")

        grid = cls(width, len(data), wrap_edges=wrap_edges)
        grid._cells = np.array(data, dtype=np.int8)
        return grid

    @classmethod
    def from_string(cls, text: str, wrap_edges: bool = True) -> "Grid":
        """Create a grid from a text picture.

        ``*``, ``O`` and ``#`` mark living cells, ``.`` and ``-`` dead ones.
        Blank lines and surrounding whitespace are ignored.

        Raises:
            InvalidDimensions: If the picture is empty or not rectangular
            ValueError: If the picture contains any other character
        """
        rows = []
        for line in text.splitlines():
            line = line.strip()
            if not line:
                continue
            row = []
            for char in line:
                if char in ALIVE_CHARS:
                    row.append(Cell.ALIVE)
                elif char in DEAD_CHARS:
                    row.append(Cell.DEAD)
                else:
                    raise ValueError(f"Unexpected character {char!r} in grid picture")
            rows.append(row)
        return cls.from_rows(rows, wrap_edges=wrap_edges)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def wrap_edges(self) -> bool:
        """Whether neighbor counting wraps around the edges."""
        return self._wrap_edges

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only copy of the cells with shape (height, width)."""
        cells = self._cells.copy()
        cells.setflags(write=False)
        return cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBounds(x, y, self._width, self._height)

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Cell.ALIVE or Cell.DEAD

        Raises:
            OutOfBounds: If either coordinate is negative or past the edge
        """
        self._check_bounds(x, y)
        return Cell(int(self._cells[y, x]))

    def set_cell(self, x: int, y: int, state: Any) -> None:
        """Set the state of a single cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            state: Cell.ALIVE/Cell.DEAD, or any truthy/falsy value

        Raises:
            OutOfBounds: If either coordinate is negative or past the edge
        """
        self._check_bounds(x, y)
        self._cells[y, x] = 1 if state else 0

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells = np.zeros((self._height, self._width), dtype=np.int8)

    def fill_cells(self, buffer: Any) -> None:
        """Write the current generation into a caller-supplied buffer.

        Cells are written in row-major order as 0 (dead) or 1 (alive). The
        buffer may be a numpy array of any shape with ``width * height``
        elements, or any mutable sequence of that length (bytearray,
        array.array, list, writable memoryview). The engine keeps no
        reference to the buffer, so one buffer can be reused for every
        generation.

        Args:
            buffer: Destination buffer

        Raises:
            SizeMismatch: If the buffer does not hold exactly width * height cells
        """
        expected = self._width * self._height
        flat = self._cells.ravel()

        if isinstance(buffer, np.ndarray):
            if buffer.size != expected:
                raise SizeMismatch(expected, buffer.size)
            np.copyto(buffer, flat.reshape(buffer.shape), casting="unsafe")
            return

        actual = len(buffer)
        if actual != expected:
            raise SizeMismatch(expected, actual)

        if isinstance(buffer, bytearray):
            buffer[:] = flat.astype(np.uint8).tobytes()
            return

        for index, value in enumerate(flat.tolist()):
            buffer[index] = value

    def snapshot(self) -> np.ndarray:
        """Return a new flat uint8 array holding the current generation."""
        snapshot = np.empty(self._width * self._height, dtype=np.uint8)
        self.fill_cells(snapshot)
        return snapshot

    def count_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a single cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        self._check_bounds(x, y)

        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy

                if self._wrap_edges:
                    count += int(self._cells[ny % self._height, nx % self._width])
                elif 0 <= nx < self._width and 0 <= ny < self._height:
                    count += int(self._cells[ny, nx])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Returns:
            Array of shape (height, width) with the neighbor count of each cell
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))

        if self._wrap_edges:
            # Circular padding joins opposite edges into a torus
            padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
            neighbors = F.conv2d(padded, self._torch_kernel)
        else:
            neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8)

    def next(self) -> None:
        """Advance the grid by exactly one generation (B3/S23).

        The next generation is computed entirely from the current one into a
        new array, which then replaces the cell buffer in a single step.
        """
        neighbors = self.count_all_neighbors()
        alive = self._cells > 0

        born = ~alive & (neighbors == 3)
        survives = alive & ((neighbors == 2) | (neighbors == 3))

        self._cells = (born | survives).astype(np.int8)

    def to_list(self) -> list:
        """Convert the grid to nested row lists of 0/1 for serialization."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._wrap_edges == other._wrap_edges
            and np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, wrap_edges={self._wrap_edges})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
