from enum import Enum, IntEnum
from typing import Tuple


class CellKind(IntEnum):
  FLOOR = 0
  WALL = 1
  MOUNTAIN = 2
  SHALLOW_WATER = 3
  MEDIUM_WATER = 4
  DEEP_WATER = 5

  def IsWater(self) -> bool:
    return self in WATER_KINDS

  def IsWallLike(self) -> bool:
    """Walls and mountains both count as solid for cave smoothing."""
    return self in (CellKind.WALL, CellKind.MOUNTAIN)

  def ToChar(self) -> str:
    return CELL_CHARS[self]


WATER_KINDS = frozenset({CellKind.SHALLOW_WATER, CellKind.MEDIUM_WATER, CellKind.DEEP_WATER})

# Cosmetic depth order used when water sub-kinds are drawn at random.
WATER_DEPTHS = (CellKind.SHALLOW_WATER, CellKind.MEDIUM_WATER, CellKind.DEEP_WATER)

CELL_CHARS = {
    CellKind.FLOOR: '.',
    CellKind.WALL: '#',
    CellKind.MOUNTAIN: '^',
    CellKind.SHALLOW_WATER: '~',
    CellKind.MEDIUM_WATER: 'w',
    CellKind.DEEP_WATER: 'W',
}
CHAR_CELLS = {char: kind for kind, char in CELL_CHARS.items()}

# Axis-aligned neighbor offsets: left, right, down, up. The order fixes BFS visiting order.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# The eight surrounding offsets used by both cellular automata.
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0))


class PlacedItem(Enum):
  BOAT = "boat"
  GOAT = "goat"
  PICKAXE = "pickaxe"


# Seed used when the caller does not pick one.
DEFAULT_SEED = 100
