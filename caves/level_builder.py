from dataclasses import dataclass, field
import logging as log
from typing import Dict, List, Optional

from rng.random_number_generator import RandomNumberGenerator
from settings import Settings

from .constants import DEFAULT_SEED, CellKind, PlacedItem
from .generation.cave_generator import CaveGenerator
from .generation.water_cluster_generator import (
    WaterClusterGenerator, WaterMask, apply_water_overlay, count_water
)
from .grid import Grid, Position
from .inventory import Inventory
from .movement_policy import MovementPolicy
from .placement.placement_search import PlacementSearch
from .validator import LevelValidator


@dataclass
class GeneratedLevel:
  seed: int
  grid: Grid
  water_mask: WaterMask
  spawn: Optional[Position]
  items: Dict[PlacedItem, Position] = field(default_factory=dict)
  failures: List[str] = field(default_factory=list)
  is_valid: bool = False

  def IsComplete(self) -> bool:
    """True when the spawn and every enabled item were placed and the level checks out."""
    return self.spawn is not None and not self.failures and self.is_valid


def _is_floor(kind: CellKind) -> bool:
  return kind == CellKind.FLOOR


class LevelBuilder(object):
  """Runs the generation pipeline: cave, water, spawn, items.

  Each phase is a separate call so a presentation layer can pace the cave
  smoothing (one Step() per frame or timer tick) and redraw in between.
  Build() runs everything in one go. All randomness comes from a single
  generator seeded with `seed`, so the same seed and settings always give
  the same level.
  """

  def __init__(self, settings: Settings, seed: int = DEFAULT_SEED) -> None:
    is_valid, errors = settings.validate()
    if not is_valid:
      raise ValueError("\n".join(errors))

    self.settings = settings
    self.seed = seed
    self.rng = RandomNumberGenerator(seed)
    if settings.walls_are_mountains:
      self.policy = MovementPolicy.WallsAsMountains()
    else:
      self.policy = MovementPolicy()

    self.cave_generator = CaveGenerator(settings.random_fill_percent, settings.grid_size, self.rng)
    self.water_generator = WaterClusterGenerator(
        settings.water_seed_percent, settings.water_simulation_steps, self.rng)
    self.placement = PlacementSearch(self.rng, settings.max_placement_tries)

    self.steps_done = 0
    self.grid: Optional[Grid] = None
    self.water_mask: Optional[WaterMask] = None
    self.spawn: Optional[Position] = None
    self.items: Dict[PlacedItem, Position] = {}
    self.failures: List[str] = []
    self._started = False

  def Start(self) -> Grid:
    """Fill the initial random cave. Returns a copy for display.

    The random generator is rewound to its seeded state, so every Start()
    begins the same level again.
    """
    self.rng.reset()
    self._started = True
    self.steps_done = 0
    self.grid = None
    self.water_mask = None
    self.spawn = None
    self.items = {}
    self.failures = []
    return self.cave_generator.RandomizeMap()

  def Step(self) -> bool:
    """Run one cave smoothing iteration.

    Returns:
      True if a step was run, False once all configured steps are done
    """
    if not self._started:
      raise RuntimeError("Start() must be called before Step()")
    if self.steps_done >= self.settings.simulation_steps:
      return False
    self.cave_generator.SmoothMap()
    self.steps_done += 1
    log.debug(f"Cave step {self.steps_done}/{self.settings.simulation_steps}")
    return True

  def GetCave(self) -> Grid:
    return self.cave_generator.GetMap()

  def FinishTerrain(self) -> Grid:
    """Run any remaining cave steps, then grow and apply the water clusters."""
    while self.Step():
      pass
    log.info("Cave simulation completed")

    cave = self.cave_generator.GetMap()
    self.water_mask = self.water_generator.Generate(cave)
    depth_rng = self.rng if self.settings.random_water_depth else None
    self.grid = apply_water_overlay(cave, self.water_mask, depth_rng)
    log.info(f"Terrain finished: {cave.CountKinds([CellKind.FLOOR])} floor cells before water, "
             f"{count_water(self.water_mask)} water cells")
    return self.grid.Copy()

  def PlaceSpawn(self, inventory: Inventory = Inventory()) -> Optional[Position]:
    self._RequireTerrain("PlaceSpawn")
    self.spawn = self.placement.FindSpawn(
        self.grid, inventory, self.settings.min_reachable_tiles, policy=self.policy)
    if self.spawn is None:
      self.failures.append("spawn")
    return self.spawn

  def PlaceItems(self) -> Dict[PlacedItem, Position]:
    """Place the boat next to water, the goat next to a wall and the pickaxe anywhere on floor."""
    self._RequireTerrain("PlaceItems")
    self.items = {}

    if self.settings.place_boat:
      self._PlaceItem(PlacedItem.BOAT, lambda taken: self.placement.FindCellWithNeighborMatching(
          self.grid, _is_floor, CellKind.IsWater, excluded=taken))
    if self.settings.place_goat:
      self._PlaceItem(PlacedItem.GOAT, lambda taken: self.placement.FindCellWithNeighborMatching(
          self.grid, _is_floor, CellKind.IsWallLike, excluded=taken))
    if self.settings.place_pickaxe:
      self._PlaceItem(PlacedItem.PICKAXE, lambda taken: self.placement.FindRandomCell(
          self.grid, _is_floor, excluded=taken))
    return dict(self.items)

  def Build(self) -> GeneratedLevel:
    self.Start()
    self.FinishTerrain()
    self.PlaceSpawn()
    self.PlaceItems()

    is_valid = self.Validate()
    if self.spawn is not None and not is_valid:
      self.failures.append("unreachable items")

    level = GeneratedLevel(
        seed=self.seed,
        grid=self.grid.Copy(),
        water_mask=[list(column) for column in self.water_mask],
        spawn=self.spawn,
        items=dict(self.items),
        failures=list(self.failures),
        is_valid=is_valid)
    if level.failures:
      log.warning(f"Seed {self.seed} finished with failures: {', '.join(level.failures)}")
    return level

  def Validate(self) -> bool:
    """Check that every placed item can be collected from the spawn under this level's movement rules."""
    self._RequireTerrain("Validate")
    return LevelValidator(self.grid, self.spawn, self.items, self.policy).IsLevelValid()

  def _PlaceItem(self, item: PlacedItem, search) -> None:
    taken = set(self.items.values())
    if self.spawn is not None:
      taken.add(self.spawn)
    position = search(taken)
    if position is None:
      log.warning(f"Could not place the {item.value}")
      self.failures.append(item.value)
      return
    log.info(f"The {item.value} is at position {tuple(position)}")
    self.items[item] = position

  def _RequireTerrain(self, caller: str) -> None:
    if self.grid is None:
      raise RuntimeError(f"FinishTerrain() must be called before {caller}()")
