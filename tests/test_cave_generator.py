"""Tests for the cellular automaton cave generator."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path to import project packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from caves.constants import CellKind
from caves.generation import CaveGenerator, count_wall_neighbors, smooth_cave
from caves.grid import Grid, Position
from rng.random_number_generator import RandomNumberGenerator

CORNERS = [Position(0, 0), Position(4, 0), Position(0, 4), Position(4, 4)]


def make_generator(fill=0.5, size=20, seed=100):
    return CaveGenerator(fill, size, RandomNumberGenerator(seed))


def test_zero_fill_gives_all_floor():
    grid = make_generator(fill=0.0).RandomizeMap()
    assert grid.CountKinds([CellKind.FLOOR]) == 20 * 20


def test_full_fill_gives_all_wall():
    grid = make_generator(fill=1.0).RandomizeMap()
    assert grid.CountKinds([CellKind.WALL]) == 20 * 20


def test_same_seed_gives_same_map():
    first = make_generator(seed=42)
    second = make_generator(seed=42)
    assert first.RandomizeMap() == second.RandomizeMap()
    for _ in range(5):
        assert first.SmoothMap() == second.SmoothMap()


def test_out_of_bounds_neighbors_count_as_walls():
    grid = Grid(5, 5)
    assert count_wall_neighbors(grid, 0, 0) == 5
    assert count_wall_neighbors(grid, 2, 0) == 3
    assert count_wall_neighbors(grid, 2, 2) == 0


def test_mountains_count_as_walls():
    grid = Grid(3, 3)
    grid.SetKind(Position(0, 0), CellKind.MOUNTAIN)
    grid.SetKind(Position(2, 2), CellKind.WALL)
    assert count_wall_neighbors(grid, 1, 1) == 2


def test_all_floor_grid_turns_only_corners_into_walls():
    smoothed = smooth_cave(Grid(5, 5))
    for position in smoothed.Positions():
        expected = CellKind.WALL if position in CORNERS else CellKind.FLOOR
        assert smoothed.GetKind(position) == expected


def test_all_wall_grid_stays_all_wall():
    grid = Grid(6, 6, fill=CellKind.WALL)
    assert smooth_cave(grid) == grid


def test_stable_grid_is_unchanged_by_further_steps():
    once = smooth_cave(Grid(5, 5))
    twice = smooth_cave(once)
    assert twice == once


@pytest.mark.parametrize("kind", [CellKind.FLOOR, CellKind.WALL])
def test_exactly_four_walls_keeps_cell(kind):
    grid = Grid(5, 5)
    for position in [Position(1, 1), Position(3, 1), Position(1, 3), Position(3, 3)]:
        grid.SetKind(position, CellKind.WALL)
    grid.SetKind(Position(2, 2), kind)
    assert count_wall_neighbors(grid, 2, 2) == 4
    assert smooth_cave(grid).GetKind(Position(2, 2)) == kind


def test_smoothing_reads_only_from_previous_grid():
    # (1, 0) sees 3 walls off the map plus the corner at (0, 0). The corner
    # only turns to wall in this very step, so it must not be counted yet.
    grid = Grid(5, 5)
    grid.SetKind(Position(1, 0), CellKind.WALL)
    smoothed = smooth_cave(grid)
    assert count_wall_neighbors(grid, 1, 0) == 3
    assert smoothed.GetKind(Position(1, 0)) == CellKind.FLOOR
    assert smoothed.GetKind(Position(0, 0)) == CellKind.WALL


def test_smoothing_does_not_modify_input():
    grid = make_generator().RandomizeMap()
    before = grid.Copy()
    smooth_cave(grid)
    make_generator().SmoothMap(grid)
    assert grid == before


def test_smooth_map_without_argument_advances_internal_grid():
    generator = make_generator(fill=0.0, size=5)
    generator.RandomizeMap()
    smoothed = generator.SmoothMap()
    assert generator.GetMap() == smoothed
    assert smoothed.GetKind(Position(0, 0)) == CellKind.WALL


def test_smooth_map_before_randomize_raises():
    with pytest.raises(RuntimeError):
        make_generator().SmoothMap()
    with pytest.raises(RuntimeError):
        make_generator().GetMap()


def test_returned_maps_are_copies():
    generator = make_generator(fill=0.0, size=5)
    grid = generator.RandomizeMap()
    grid.SetKind(Position(2, 2), CellKind.WALL)
    assert generator.GetMap().GetKind(Position(2, 2)) == CellKind.FLOOR


@pytest.mark.parametrize("fill,size", [(0.5, 0), (0.5, -3), (-0.1, 10), (1.5, 10)])
def test_invalid_arguments_raise(fill, size):
    with pytest.raises(ValueError):
        CaveGenerator(fill, size, RandomNumberGenerator(1))
