"""Tests for the bounded BFS in ReachabilityAnalyzer."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import project packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from caves.constants import CellKind
from caves.grid import Grid, Position
from caves.inventory import Inventory
from caves.movement_policy import WalkabilityGraph
from caves.reachability import ReachabilityAnalyzer

F = CellKind.FLOOR
M = CellKind.MOUNTAIN
S = CellKind.SHALLOW_WATER


@pytest.fixture
def analyzer():
    return ReachabilityAnalyzer()


def count(analyzer, grid, inventory, start, cap):
    return analyzer.CountReachable(WalkabilityGraph(grid, inventory), Position(*start), cap)


def test_water_blocks_without_boat(analyzer):
    grid = Grid.FromColumns([[F, S, F]])
    assert count(analyzer, grid, Inventory(has_boat=False), (0, 0), 10) == 1


def test_water_crossable_with_boat(analyzer):
    grid = Grid.FromColumns([[F, S, F]])
    assert count(analyzer, grid, Inventory(has_boat=True), (0, 0), 10) == 3


def test_mountain_blocks_without_equipment(analyzer):
    grid = Grid.FromColumns([[F, M, F]])
    assert count(analyzer, grid, Inventory(), (0, 0), 10) == 1


@pytest.mark.parametrize("inventory", [Inventory(has_goat=True), Inventory(has_pickaxe=True)])
def test_mountain_crossable_with_goat_or_pickaxe(analyzer, inventory):
    grid = Grid.FromColumns([[F, M, F]])
    assert count(analyzer, grid, inventory, (0, 0), 10) == 3


def test_small_area_does_not_reach_cap(analyzer):
    grid = Grid(10, 10)
    grid.SetKind(Position(5, 5), CellKind.MOUNTAIN)
    reachable = count(analyzer, grid, Inventory(), (5, 4), 100)
    assert reachable < 100
    assert reachable == 99


def test_large_open_area_reaches_cap(analyzer):
    grid = Grid(30, 30)
    assert count(analyzer, grid, Inventory(), (15, 15), 100) >= 100


def test_search_stops_at_cap(analyzer):
    grid = Grid(30, 30)
    assert count(analyzer, grid, Inventory(), (15, 15), 100) == 100


def test_unwalkable_start_returns_zero(analyzer):
    grid = Grid(3, 3)
    grid.SetKind(Position(1, 1), CellKind.WALL)
    assert count(analyzer, grid, Inventory(True, True, True), (1, 1), 5) == 0
    assert count(analyzer, grid, Inventory(), (7, 7), 5) == 0


def test_count_is_monotonic_in_cap_until_component_size(analyzer):
    grid = Grid(6, 6)
    # Wall off the right two columns so the component holds 4 * 6 = 24 cells
    for y in range(6):
        grid.SetKind(Position(4, y), CellKind.WALL)
    graph = WalkabilityGraph(grid, Inventory())
    component_size = len(analyzer.CollectReachable(graph, Position(0, 0)))
    assert component_size == 24

    previous = 0
    for cap in range(1, 40):
        reachable = analyzer.CountReachable(graph, Position(0, 0), cap)
        assert reachable >= previous
        assert reachable == min(cap, component_size)
        previous = reachable


def test_collect_reachable_without_cap_explores_whole_component(analyzer):
    grid = Grid.FromColumns([[F, F, M, F], [F, F, M, F]])
    graph = WalkabilityGraph(grid, Inventory())
    assert analyzer.CollectReachable(graph, Position(0, 0)) == {
        Position(0, 0), Position(0, 1), Position(1, 0), Position(1, 1)}


def test_each_cell_is_expanded_once(analyzer):
    class CountingGraph(WalkabilityGraph):
        def __init__(self, *args):
            super().__init__(*args)
            self.expanded = []

        def Neighbors(self, position):
            self.expanded.append(position)
            return super().Neighbors(position)

    graph = CountingGraph(Grid(5, 5), Inventory())
    analyzer.CollectReachable(graph, Position(2, 2))
    assert len(graph.expanded) == 25
    assert len(set(graph.expanded)) == 25


def test_cap_below_one_is_rejected(analyzer):
    graph = WalkabilityGraph(Grid(2, 2), Inventory())
    with pytest.raises(ValueError):
        analyzer.CountReachable(graph, Position(0, 0), 0)
