from typing import AbstractSet, Iterator, Optional

from .constants import NEIGHBOR_OFFSETS, CellKind
from .grid import Position, TileLookup
from .inventory import Inventory

DEFAULT_MOUNTAIN_KINDS = frozenset({CellKind.MOUNTAIN})


class MovementPolicy(object):
  """Decides which cell kinds the player may stand on for a given inventory.

  Floor is always walkable, water needs the boat, mountains need the goat or
  the pickaxe and everything else (plain walls, missing tiles) is blocked.
  Which kinds count as mountains is configurable so that a level can declare
  its generated walls climbable.
  """

  def __init__(self, mountain_kinds: AbstractSet[CellKind] = DEFAULT_MOUNTAIN_KINDS) -> None:
    mountain_kinds = frozenset(mountain_kinds)
    for kind in mountain_kinds:
      if kind == CellKind.FLOOR or kind.IsWater():
        raise ValueError(f"{kind.name} cannot be treated as a mountain")
    self.mountain_kinds = mountain_kinds

  @classmethod
  def WallsAsMountains(cls) -> "MovementPolicy":
    return cls(DEFAULT_MOUNTAIN_KINDS | {CellKind.WALL})

  def IsMountain(self, kind: Optional[CellKind]) -> bool:
    return kind in self.mountain_kinds

  def IsWalkable(self, kind: Optional[CellKind], inventory: Inventory) -> bool:
    if kind is None:
      return False
    if kind in self.mountain_kinds:
      return inventory.CanCrossMountains()
    if kind == CellKind.FLOOR:
      return True
    if kind.IsWater():
      return inventory.CanCrossWater()
    return False


class WalkabilityGraph(object):
  """Implicit graph over a tile lookup: nodes are positions, edges join walkable neighbors.

  The inventory is read at construction; build a new graph after every pickup.
  """

  def __init__(self, lookup: TileLookup, inventory: Inventory,
               policy: Optional[MovementPolicy] = None) -> None:
    self.lookup = lookup
    self.inventory = inventory
    self.policy = policy if policy is not None else MovementPolicy()

  def IsWalkable(self, position: Position) -> bool:
    # Out-of-bounds lookups come back as None, which the policy rejects.
    return self.policy.IsWalkable(self.lookup.GetKind(position), self.inventory)

  def Neighbors(self, position: Position) -> Iterator[Position]:
    """Walkable axis-aligned neighbors in the fixed order left, right, down, up."""
    for dx, dy in NEIGHBOR_OFFSETS:
      neighbor = Position(position.x + dx, position.y + dy)
      if self.IsWalkable(neighbor):
        yield neighbor
