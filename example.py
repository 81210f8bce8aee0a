#!/usr/bin/env python3
"""
Example usage of the lifegame engine from a caller's point of view.
"""

import numpy as np

from lifegame import Grid, PatternLibrary


def main():
    """Seed a glider, then export and advance a few generations."""
    width, height = 12, 8
    grid = Grid.create(width, height)

    # One buffer, reused for every snapshot
    buffer = np.zeros(width * height, dtype=np.uint8)

    glider = PatternLibrary().get_pattern("Glider")
    glider.apply_to_grid(grid, offset_x=1, offset_y=1)

    for generation in range(5):
        grid.fill_cells(buffer)
        print(f"Generation {generation} (population {int(buffer.sum())}):")
        print(buffer.reshape(height, width))
        print()
        grid.next()


if __name__ == "__main__":
    main()
