"""Command-line driver that animates a Game of Life grid in the terminal."""

import argparse
import sys
import time
from typing import List, Optional, Sequence

import numpy as np

from ..core.cell import Cell
from ..core.errors import LifeGameError
from ..core.grid import Grid
from ..core.patterns import PatternLibrary

CLEAR_SCREEN = "\033[H\033[2J"


class CLILifeGame:
    """Terminal driver for the grid engine.

    The driver owns its grid and calls into it from a single loop, so all
    engine calls are serialized. Timing, seeding and rendering all live
    here; the grid only stores cells and advances generations.
    """

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def seed_random(self, grid: Grid, population_rate: float, rng: np.random.Generator) -> int:
        """Bring a random fraction of cells to life.

        Args:
            grid: Grid to seed
            population_rate: Chance each cell will be alive (0.0 to 1.0)
            rng: Random number generator

        Returns:
            Number of cells set alive
        """
        mask = rng.random((grid.height, grid.width)) < population_rate
        grid.clear()
        for y, x in np.argwhere(mask):
            grid.set_cell(int(x), int(y), Cell.ALIVE)
        return int(mask.sum())

    def seed_pattern(self, grid: Grid, name: str, offset_x: Optional[int] = None, offset_y: Optional[int] = None) -> bool:
        """Place a library pattern on the grid, centered when no offset is given.

        Returns:
            False if the pattern is unknown, True otherwise
        """
        pattern = self.pattern_library.get_pattern(name)
        if pattern is None:
            return False

        pattern_width, pattern_height = pattern.get_size()
        if offset_x is None:
            offset_x = max(0, (grid.width - pattern_width) // 2)
        if offset_y is None:
            offset_y = max(0, (grid.height - pattern_height) // 2)

        pattern.apply_to_grid(grid, offset_x, offset_y)
        return True

    @staticmethod
    def render(buffer: Sequence[int], width: int, height: int) -> str:
        """Render a row-major snapshot as text, '*' for alive and '.' for dead."""
        rows = []
        for y in range(height):
            row = buffer[y * width:(y + 1) * width]
            rows.append("".join("*" if cell else "." for cell in row))
        return "\n".join(rows)

    def run(
        self,
        grid: Grid,
        generations: int = 0,
        interval: float = 0.1,
        clear_screen: bool = True,
        verbose: bool = False,
    ) -> int:
        """Draw and advance the grid until done or interrupted.

        Args:
            grid: Grid to animate
            generations: Number of generations to advance (0 runs until Ctrl-C)
            interval: Seconds to wait between generations
            clear_screen: Whether to redraw in place using ANSI escapes
            verbose: Print progress information

        Returns:
            Number of generations advanced
        """
        buffer = bytearray(grid.width * grid.height)
        generation = 0

        if verbose:
            limit = generations if generations else "unlimited"
            print(f"Running {grid.width}x{grid.height} grid (toroidal: {grid.wrap_edges}, generations: {limit})")

        try:
            while True:
                grid.fill_cells(buffer)
                self._draw(buffer, grid, generation, clear_screen)

                if generations and generation >= generations:
                    break

                grid.next()
                generation += 1

                if interval > 0:
                    time.sleep(interval)
        except KeyboardInterrupt:
            print("\nInterrupted")

        if verbose:
            print(f"Stopped after {generation} generations")
        return generation

    def _draw(self, buffer: bytearray, grid: Grid, generation: int, clear_screen: bool) -> None:
        if clear_screen:
            print(CLEAR_SCREEN, end="")
        print(f"Generation {generation}  Population {sum(buffer)}")
        print(self.render(buffer, grid.width, grid.height))

    def list_patterns(self) -> None:
        """Print the available patterns grouped by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                width, height = pattern.get_size()
                print(f"  {name} ({width}x{height}) - {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 40x20 grid with 20% population, redrawn every 0.2s
  lifegame -W 40 -H 20 -p 0.2 -i 0.2

  # Glider on a small torus for 50 generations
  lifegame -W 12 -H 12 --pattern Glider -n 50

  # Clipped edges instead of wrapping
  lifegame --pattern R-pentomino --bounded

  # List available patterns
  lifegame --list-patterns
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=100, help="Grid width (default: 100)")
    parser.add_argument("-H", "--height", type=int, default=100, help="Grid height (default: 100)")
    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.2,
        help="Initial random population rate 0.0-1.0 (default: 0.2)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument(
        "--bounded",
        action="store_true",
        help="Treat cells past the edge as dead instead of wrapping around",
    )

    parser.add_argument("--pattern", type=str, help="Load a pattern instead of random population")
    parser.add_argument("--pattern-x", type=int, help="X offset for pattern placement (default: centered)")
    parser.add_argument("--pattern-y", type=int, help="Y offset for pattern placement (default: centered)")

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=0,
        help="Generations to run, 0 for no limit (default: 0)",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=0.1,
        help="Seconds between generations (default: 0.1)",
    )
    parser.add_argument("--no-clear", action="store_true", help="Print frames one after another")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress information")
    parser.add_argument("--list-patterns", action="store_true", help="List all available patterns and exit")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")
    if args.height <= 0:
        errors.append("Height must be positive")
    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")
    if args.generations < 0:
        errors.append("Generations must be zero or positive")
    if args.interval < 0:
        errors.append("Interval must be zero or positive")
    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")
    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLILifeGame()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        grid = Grid(args.width, args.height, wrap_edges=not args.bounded)
    except LifeGameError as e:
        print(f"Error: {e}")
        return 1

    if args.pattern:
        if not cli.seed_pattern(grid, args.pattern, args.pattern_x, args.pattern_y):
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
            return 1
        if args.verbose:
            print(f"Loaded pattern '{args.pattern}' ({grid.population} cells)")
    else:
        alive = cli.seed_random(grid, args.population, np.random.default_rng(args.seed))
        if args.verbose:
            print(f"Generated random population: {alive} cells (rate: {args.population:.2%})")

    cli.run(
        grid,
        generations=args.generations,
        interval=args.interval,
        clear_screen=not args.no_clear,
        verbose=args.verbose,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
