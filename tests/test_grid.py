import sys
from pathlib import Path

import pytest

# Add parent directory to path to import project packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from caves.constants import CellKind
from caves.grid import Grid, Position


def test_from_strings_puts_top_row_at_highest_y():
    grid = Grid.FromStrings([
        "#.",
        "~^",
    ])
    assert grid.GetKind(Position(0, 1)) == CellKind.WALL
    assert grid.GetKind(Position(1, 1)) == CellKind.FLOOR
    assert grid.GetKind(Position(0, 0)) == CellKind.SHALLOW_WATER
    assert grid.GetKind(Position(1, 0)) == CellKind.MOUNTAIN
    assert grid.ToString() == "#.\n~^"


def test_from_columns_is_column_major():
    grid = Grid.FromColumns([[CellKind.FLOOR, CellKind.WALL, CellKind.FLOOR]])
    assert (grid.width, grid.height) == (1, 3)
    assert grid.GetKind(Position(0, 1)) == CellKind.WALL


def test_out_of_bounds_lookup_returns_none():
    grid = Grid(2, 2)
    assert grid.GetKind(Position(2, 0)) is None
    assert grid.GetKind(Position(0, -1)) is None


def test_out_of_bounds_write_raises():
    with pytest.raises(IndexError):
        Grid(2, 2).SetKind(Position(-1, 0), CellKind.WALL)


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions_raise(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


@pytest.mark.parametrize("rows", [[], ["..", "."], [".x"]])
def test_bad_text_rows_raise(rows):
    with pytest.raises(ValueError):
        Grid.FromStrings(rows)


def test_copy_is_independent():
    grid = Grid(3, 3)
    copy = grid.Copy()
    copy.SetKind(Position(1, 1), CellKind.WALL)
    assert grid.GetKind(Position(1, 1)) == CellKind.FLOOR
    assert grid != copy


def test_positions_cover_every_cell_once():
    grid = Grid(4, 3)
    positions = list(grid.Positions())
    assert len(positions) == 12
    assert len(set(positions)) == 12
    assert positions[0] == Position(0, 0)
    assert positions[1] == Position(1, 0)


def test_count_kinds():
    grid = Grid.FromStrings(["~w#", "W.^"])
    assert grid.CountKinds([CellKind.SHALLOW_WATER, CellKind.MEDIUM_WATER,
                            CellKind.DEEP_WATER]) == 3
    assert grid.Count(lambda kind: kind.IsWallLike()) == 2
