"""Fixed-size 2D grid of cell kinds plus the minimal tile lookup interface."""

from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Protocol, Sequence

from .constants import CHAR_CELLS, CellKind


class Position(NamedTuple):
  x: int
  y: int

  def Offset(self, dx: int, dy: int) -> "Position":
    return Position(self.x + dx, self.y + dy)


class TileLookup(Protocol):
  """Anything that can report and change the kind of a cell.

  An in-memory Grid satisfies this, and so can a presentation-side tilemap.
  GetKind returns None for positions with no tile (including out of bounds).
  """

  def GetKind(self, position: Position) -> Optional[CellKind]:
    ...

  def SetKind(self, position: Position, kind: CellKind) -> None:
    ...


class Grid(object):
  """Column-major grid: cells[x][y] for x in [0, width), y in [0, height)."""

  def __init__(self, width: int, height: int, fill: CellKind = CellKind.FLOOR) -> None:
    if width < 1 or height < 1:
      raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    self.width = width
    self.height = height
    self.cells: List[List[CellKind]] = [[fill] * height for _ in range(width)]

  @classmethod
  def FromColumns(cls, columns: Sequence[Sequence[CellKind]]) -> "Grid":
    """Build a grid from columns, so that columns[x][y] is the cell at (x, y)."""
    if not columns or not columns[0]:
      raise ValueError("Grid needs at least one column and one row")
    height = len(columns[0])
    if any(len(column) != height for column in columns):
      raise ValueError("All grid columns must have the same height")
    grid = cls(len(columns), height)
    for x, column in enumerate(columns):
      grid.cells[x] = [CellKind(kind) for kind in column]
    return grid

  @classmethod
  def FromStrings(cls, rows: Sequence[str]) -> "Grid":
    """Build a grid from text rows, top row first (the highest y).

    Characters follow CELL_CHARS: '.' floor, '#' wall, '^' mountain, '~' 'w' 'W' water.
    """
    if not rows:
      raise ValueError("Grid needs at least one row")
    height = len(rows)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
      raise ValueError("All grid rows must have the same width")
    grid = cls(width, height)
    for row_index, row in enumerate(rows):
      y = height - 1 - row_index
      for x, char in enumerate(row):
        if char not in CHAR_CELLS:
          raise ValueError(f"Unknown cell character {char!r} at ({x}, {y})")
        grid.cells[x][y] = CHAR_CELLS[char]
    return grid

  def InBounds(self, x: int, y: int) -> bool:
    return 0 <= x < self.width and 0 <= y < self.height

  def Contains(self, position: Position) -> bool:
    return self.InBounds(position.x, position.y)

  def GetKind(self, position: Position) -> Optional[CellKind]:
    if not self.Contains(position):
      return None
    return self.cells[position.x][position.y]

  def SetKind(self, position: Position, kind: CellKind) -> None:
    if not self.Contains(position):
      raise IndexError(f"Position {tuple(position)} is outside a {self.width}x{self.height} grid")
    self.cells[position.x][position.y] = kind

  def Copy(self) -> "Grid":
    grid = Grid(self.width, self.height)
    grid.cells = [list(column) for column in self.cells]
    return grid

  def Positions(self) -> Iterator[Position]:
    """All positions, row by row from y = 0."""
    for y in range(self.height):
      for x in range(self.width):
        yield Position(x, y)

  def Count(self, predicate: Callable[[CellKind], bool]) -> int:
    return sum(1 for column in self.cells for kind in column if predicate(kind))

  def CountKinds(self, kinds: Iterable[CellKind]) -> int:
    kinds = frozenset(kinds)
    return self.Count(lambda kind: kind in kinds)

  def ToString(self) -> str:
    """Text dump with the highest row first, for logs and debugging."""
    rows = []
    for y in reversed(range(self.height)):
      rows.append("".join(self.cells[x][y].ToChar() for x in range(self.width)))
    return "\n".join(rows)

  def __eq__(self, other: object) -> bool:
    if not isinstance(other, Grid):
      return NotImplemented
    return self.width == other.width and self.height == other.height and self.cells == other.cells

  def __repr__(self) -> str:
    return f"Grid({self.width}x{self.height})"
