from typing import Dict, Iterable, Optional, Set
import logging as log

from .constants import PlacedItem
from .grid import Grid, Position
from .inventory import Inventory
from .movement_policy import MovementPolicy, WalkabilityGraph
from .reachability import ReachabilityAnalyzer


class LevelValidator(object):
  """Checks that every placed item can be collected starting from the spawn.

  Starting with an empty inventory, the validator repeatedly floods the level
  from the spawn, picks up every item lying inside the flooded area, and
  floods again with the bigger inventory until a pass picks up nothing new.
  """

  def __init__(self, grid: Grid, spawn: Optional[Position],
               items: Dict[PlacedItem, Position],
               policy: Optional[MovementPolicy] = None) -> None:
    self.grid = grid
    self.spawn = spawn
    self.items = items
    self.policy = policy if policy is not None else MovementPolicy()
    self.analyzer = ReachabilityAnalyzer()
    self.inventory = Inventory()
    self.collected: Set[PlacedItem] = set()

  def GetReachablePositions(self, inventory: Inventory) -> Set[Position]:
    if self.spawn is None:
      return set()
    graph = WalkabilityGraph(self.grid, inventory, self.policy)
    return self.analyzer.CollectReachable(graph, self.spawn)

  def IsLevelValid(self, required_items: Optional[Iterable[PlacedItem]] = None) -> bool:
    log.debug("Starting check of whether the level is completable")
    if self.spawn is None:
      log.warning("FAILURE: Level has no spawn point")
      return False

    required = set(self.items) if required_items is None else set(required_items)
    never_placed = required - set(self.items)
    if never_placed:
      log.warning("FAILURE: Required items were never placed: "
                  + ", ".join(sorted(item.value for item in never_placed)))
      return False

    self.inventory = Inventory()
    self.collected = set()
    still_making_progress = True
    num_iterations = 0
    while still_making_progress:
      num_iterations += 1
      still_making_progress = False
      reachable = self.GetReachablePositions(self.inventory)
      log.debug(f"Iteration {num_iterations}: {len(reachable)} reachable cells, "
                f"inventory contains: {self.inventory.ToString()}")

      # PlacedItem order keeps pickups deterministic
      for item in PlacedItem:
        if item in self.collected or item not in self.items:
          continue
        if self.items[item] in reachable:
          log.debug(f"  -> Found {item.value} at {tuple(self.items[item])}")
          self.collected.add(item)
          self.inventory = self.inventory.WithItem(item)
          still_making_progress = True

    missing = required - self.collected
    if missing:
      log.warning("FAILURE: Unreachable items: " + ", ".join(sorted(item.value for item in missing)))
      return False

    log.info(f"SUCCESS: Level is completable after {num_iterations} passes")
    return True
