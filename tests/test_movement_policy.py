"""Tests for MovementPolicy and WalkabilityGraph."""

import itertools
import sys
from pathlib import Path

import pytest

# Add parent directory to path to import project packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from caves.constants import WATER_KINDS, CellKind
from caves.grid import Grid, Position
from caves.inventory import Inventory
from caves.movement_policy import MovementPolicy, WalkabilityGraph

ALL_INVENTORIES = [
    Inventory(has_boat=boat, has_goat=goat, has_pickaxe=pickaxe)
    for boat, goat, pickaxe in itertools.product([False, True], repeat=3)
]


@pytest.fixture
def policy():
    return MovementPolicy()


@pytest.mark.parametrize("inventory", ALL_INVENTORIES)
def test_floor_is_always_walkable(policy, inventory):
    assert policy.IsWalkable(CellKind.FLOOR, inventory)


@pytest.mark.parametrize("inventory", ALL_INVENTORIES)
@pytest.mark.parametrize("water_kind", sorted(WATER_KINDS))
def test_water_needs_boat(policy, inventory, water_kind):
    assert policy.IsWalkable(water_kind, inventory) == inventory.has_boat


@pytest.mark.parametrize("inventory", ALL_INVENTORIES)
def test_mountain_needs_goat_or_pickaxe(policy, inventory):
    expected = inventory.has_goat or inventory.has_pickaxe
    assert policy.IsWalkable(CellKind.MOUNTAIN, inventory) == expected


@pytest.mark.parametrize("inventory", ALL_INVENTORIES)
def test_wall_is_never_walkable(policy, inventory):
    assert not policy.IsWalkable(CellKind.WALL, inventory)


def test_missing_tile_is_not_walkable(policy):
    assert not policy.IsWalkable(None, Inventory(True, True, True))


def test_walls_as_mountains_policy_gates_walls():
    policy = MovementPolicy.WallsAsMountains()
    assert not policy.IsWalkable(CellKind.WALL, Inventory())
    assert policy.IsWalkable(CellKind.WALL, Inventory(has_goat=True))
    assert policy.IsWalkable(CellKind.WALL, Inventory(has_pickaxe=True))
    assert policy.IsMountain(CellKind.MOUNTAIN)


@pytest.mark.parametrize("kind", [CellKind.FLOOR, CellKind.SHALLOW_WATER, CellKind.DEEP_WATER])
def test_floor_and_water_cannot_be_mountains(kind):
    with pytest.raises(ValueError):
        MovementPolicy({kind})


def test_neighbors_follow_left_right_down_up_order():
    graph = WalkabilityGraph(Grid(3, 3), Inventory())
    neighbors = list(graph.Neighbors(Position(1, 1)))
    assert neighbors == [Position(0, 1), Position(2, 1), Position(1, 0), Position(1, 2)]


def test_neighbors_skip_out_of_bounds_cells():
    graph = WalkabilityGraph(Grid(3, 3), Inventory())
    assert list(graph.Neighbors(Position(0, 0))) == [Position(1, 0), Position(0, 1)]


def test_neighbors_skip_blocked_cells():
    grid = Grid(3, 3)
    grid.SetKind(Position(0, 1), CellKind.WALL)
    grid.SetKind(Position(1, 2), CellKind.DEEP_WATER)
    graph = WalkabilityGraph(grid, Inventory())
    assert list(graph.Neighbors(Position(1, 1))) == [Position(2, 1), Position(1, 0)]

    with_boat = WalkabilityGraph(grid, Inventory(has_boat=True))
    assert list(with_boat.Neighbors(Position(1, 1))) == [
        Position(2, 1), Position(1, 0), Position(1, 2)]


def test_out_of_bounds_positions_are_not_walkable():
    graph = WalkabilityGraph(Grid(2, 2), Inventory(True, True, True))
    assert not graph.IsWalkable(Position(-1, 0))
    assert not graph.IsWalkable(Position(0, 2))
    assert graph.IsWalkable(Position(1, 1))
