import sys
from pathlib import Path

import pytest

# Add parent directory to path to import project packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from caves import dig
from caves.constants import CellKind
from caves.grid import Grid, Position
from caves.inventory import Inventory
from caves.movement_policy import MovementPolicy


@pytest.fixture
def grid():
    return Grid.FromStrings([
        ".^.",
        "^^#",
        "...",
    ])


def test_dig_with_pickaxe_turns_only_target_into_floor(grid):
    expected = grid.Copy()
    expected.SetKind(Position(1, 1), CellKind.FLOOR)
    inventory = Inventory(has_pickaxe=True)

    assert dig(grid, Position(1, 1), inventory)
    assert grid == expected
    assert inventory == Inventory(has_pickaxe=True)


@pytest.mark.parametrize("inventory", [Inventory(), Inventory(has_goat=True), Inventory(has_boat=True)])
def test_dig_without_pickaxe_is_noop(grid, inventory):
    before = grid.Copy()
    assert not dig(grid, Position(1, 1), inventory)
    assert grid == before


@pytest.mark.parametrize("position", [Position(0, 0), Position(2, 1), Position(5, 5), Position(-1, 0)])
def test_dig_on_non_mountain_is_noop(grid, position):
    before = grid.Copy()
    assert not dig(grid, position, Inventory(has_pickaxe=True))
    assert grid == before


def test_dig_walls_when_walls_are_mountains(grid):
    policy = MovementPolicy.WallsAsMountains()
    assert dig(grid, Position(2, 1), Inventory(has_pickaxe=True), policy)
    assert grid.GetKind(Position(2, 1)) == CellKind.FLOOR


def test_dug_cell_becomes_walkable_without_equipment(grid):
    policy = MovementPolicy()
    assert not policy.IsWalkable(grid.GetKind(Position(0, 1)), Inventory())
    dig(grid, Position(0, 1), Inventory(has_pickaxe=True))
    assert policy.IsWalkable(grid.GetKind(Position(0, 1)), Inventory())
