"""Cellular automaton cave generator.

Turns random wall/floor noise into blob-shaped caves. Every smoothing step
reads from a snapshot of the previous grid and writes a brand new grid, so the
order in which cells are visited never affects the result.
"""

import logging as log
from typing import Optional

from rng.random_number_generator import RandomNumberGenerator

from ..constants import MOORE_OFFSETS, CellKind
from ..grid import Grid

# A cell with more wall neighbors than this becomes a wall, fewer becomes floor.
WALL_THRESHOLD = 4


class CaveGenerator:
    """Produces and iteratively smooths a square wall/floor grid.

    The caller drives the number of smoothing iterations, one SmoothMap() call
    per step, so generation can be paced by an outside scheduler.
    """

    def __init__(self, fill_probability: float, size: int, rng: RandomNumberGenerator):
        """Initialize the generator.

        Args:
            fill_probability: Chance in [0, 1] that a cell starts out as a wall
            size: Width and height of the square grid
            rng: Seeded random source

        Raises:
            ValueError: If size is not positive or fill_probability is outside [0, 1]
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Cave size must be a positive integer, got {size!r}")
        if not 0.0 <= fill_probability <= 1.0:
            raise ValueError(f"Fill probability must be in [0, 1], got {fill_probability!r}")

        self.fill_probability = fill_probability
        self.size = size
        self.rng = rng
        self._grid: Optional[Grid] = None

    def RandomizeMap(self) -> Grid:
        """Fill a fresh grid with independent random walls.

        Returns:
            A copy of the new grid; the generator keeps its own copy for SmoothMap().
        """
        grid = Grid(self.size, self.size)
        for y in range(self.size):
            for x in range(self.size):
                if self.rng.chance(self.fill_probability):
                    grid.cells[x][y] = CellKind.WALL
        self._grid = grid
        log.debug(f"Randomized {self.size}x{self.size} cave with "
                  f"{grid.CountKinds([CellKind.WALL])} walls")
        return grid.Copy()

    def SmoothMap(self, grid: Optional[Grid] = None) -> Grid:
        """Apply one cellular automaton step.

        Args:
            grid: Grid to smooth. When omitted, the generator's current grid is
                smoothed and replaced by the result.

        Returns:
            The smoothed grid. The input grid is never modified.

        Raises:
            RuntimeError: If no grid was passed and RandomizeMap() was never called
        """
        if grid is None:
            if self._grid is None:
                raise RuntimeError("RandomizeMap() must be called before SmoothMap()")
            self._grid = smooth_cave(self._grid)
            return self._grid.Copy()
        return smooth_cave(grid)

    def GetMap(self) -> Grid:
        if self._grid is None:
            raise RuntimeError("RandomizeMap() must be called before GetMap()")
        return self._grid.Copy()


def count_wall_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count wall-like cells among the 8 neighbors of (x, y).

    Out-of-bounds neighbors count as walls, which pushes the map edges toward walls.
    """
    count = 0
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if not grid.InBounds(nx, ny):
            count += 1
        elif grid.cells[nx][ny].IsWallLike():
            count += 1
    return count


def smooth_cave(source: Grid) -> Grid:
    """One simultaneous update step: read only from source, write only to the result."""
    result = source.Copy()
    for y in range(source.height):
        for x in range(source.width):
            walls = count_wall_neighbors(source, x, y)
            if walls > WALL_THRESHOLD:
                result.cells[x][y] = CellKind.WALL
            elif walls < WALL_THRESHOLD:
                result.cells[x][y] = CellKind.FLOOR
    return result
