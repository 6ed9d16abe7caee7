"""Water overlay: seeds water on floor cells and grows it into clusters."""

import logging as log
from typing import List, Optional

from rng.random_number_generator import RandomNumberGenerator

from ..constants import MOORE_OFFSETS, WATER_DEPTHS, CellKind
from ..grid import Grid

# water_mask[x][y] is True where the cell holds water.
WaterMask = List[List[bool]]

# At least this many water neighbors turns a cell into water.
GROW_THRESHOLD = 4
# At most this many water neighbors dries a cell out.
DRY_THRESHOLD = 1


class WaterClusterGenerator:
    """Builds a binary water mask aligned with a finished cave grid.

    Only floor cells can ever hold water. Unlike cave smoothing, neighbors
    outside the grid are not counted, so water does not cling to map edges.
    """

    def __init__(self, water_seed_percent: float, water_simulation_steps: int,
                 rng: RandomNumberGenerator):
        """Initialize the generator.

        Args:
            water_seed_percent: Chance in [0, 1] that a floor cell starts as water
            water_simulation_steps: Number of clustering steps, at least 1
            rng: Seeded random source

        Raises:
            ValueError: On a probability outside [0, 1] or a non-positive step count
        """
        if not 0.0 <= water_seed_percent <= 1.0:
            raise ValueError(f"Water seed percent must be in [0, 1], got {water_seed_percent!r}")
        if (isinstance(water_simulation_steps, bool) or not isinstance(water_simulation_steps, int)
                or water_simulation_steps < 1):
            raise ValueError(
                f"Water simulation steps must be a positive integer, got {water_simulation_steps!r}")

        self.water_seed_percent = water_seed_percent
        self.water_simulation_steps = water_simulation_steps
        self.rng = rng

    def SeedWater(self, cave: Grid) -> WaterMask:
        """Mark each floor cell as a water seed independently. Walls are never seeded."""
        mask = empty_mask(cave)
        for y in range(cave.height):
            for x in range(cave.width):
                if cave.cells[x][y] == CellKind.FLOOR and self.rng.chance(self.water_seed_percent):
                    mask[x][y] = True
        return mask

    def SmoothWater(self, cave: Grid, mask: WaterMask) -> WaterMask:
        """One clustering step computed entirely from the previous mask."""
        result = empty_mask(cave)
        for y in range(cave.height):
            for x in range(cave.width):
                if cave.cells[x][y] != CellKind.FLOOR:
                    continue
                neighbors = count_water_neighbors(mask, x, y)
                if neighbors >= GROW_THRESHOLD:
                    result[x][y] = True
                elif neighbors <= DRY_THRESHOLD:
                    result[x][y] = False
                else:
                    result[x][y] = mask[x][y]
        return result

    def Generate(self, cave: Grid) -> WaterMask:
        mask = self.SeedWater(cave)
        log.debug(f"Seeded {count_water(mask)} water cells")
        for step in range(self.water_simulation_steps):
            mask = self.SmoothWater(cave, mask)
            log.debug(f"Water step {step + 1}/{self.water_simulation_steps}: "
                      f"{count_water(mask)} water cells")
        return mask


def empty_mask(grid: Grid) -> WaterMask:
    return [[False] * grid.height for _ in range(grid.width)]


def count_water(mask: WaterMask) -> int:
    return sum(sum(column) for column in mask)


def count_water_neighbors(mask: WaterMask, x: int, y: int) -> int:
    """Count water among the 8 neighbors of (x, y). Out-of-bounds cells are skipped."""
    width = len(mask)
    height = len(mask[0])
    count = 0
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if nx < 0 or nx >= width or ny < 0 or ny >= height:
            continue
        if mask[nx][ny]:
            count += 1
    return count


def apply_water_overlay(cave: Grid, mask: WaterMask,
                        rng: Optional[RandomNumberGenerator] = None) -> Grid:
    """Return a new grid with every masked floor cell turned into water.

    With an rng, each water cell gets a shallow, medium or deep sub-kind with
    equal odds. Without one, all water is shallow. The depth is cosmetic only.
    """
    if len(mask) != cave.width or any(len(column) != cave.height for column in mask):
        raise ValueError("Water mask does not match the cave grid dimensions")

    result = cave.Copy()
    for y in range(cave.height):
        for x in range(cave.width):
            if not mask[x][y] or cave.cells[x][y] != CellKind.FLOOR:
                continue
            depth = CellKind.SHALLOW_WATER
            if rng is not None:
                roll = rng.random()
                if roll < 0.33:
                    depth = WATER_DEPTHS[0]
                elif roll < 0.66:
                    depth = WATER_DEPTHS[1]
                else:
                    depth = WATER_DEPTHS[2]
            result.cells[x][y] = depth
    return result
