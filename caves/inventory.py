from dataclasses import dataclass, replace
import logging as log

from .constants import PlacedItem


@dataclass(frozen=True)
class Inventory(object):
  """Immutable snapshot of the player's traversal capabilities.

  Pickups never modify a snapshot; they build a new one with WithItem() and
  hand it to later reachability queries.
  """
  has_boat: bool = False
  has_goat: bool = False
  has_pickaxe: bool = False

  def Has(self, item: PlacedItem) -> bool:
    if item == PlacedItem.BOAT:
      return self.has_boat
    elif item == PlacedItem.GOAT:
      return self.has_goat
    elif item == PlacedItem.PICKAXE:
      return self.has_pickaxe
    raise ValueError(f"Unknown item {item}")

  def WithItem(self, item: PlacedItem) -> "Inventory":
    if self.Has(item):
      return self
    log.debug(f"Picked up {item.value}")
    if item == PlacedItem.BOAT:
      return replace(self, has_boat=True)
    elif item == PlacedItem.GOAT:
      return replace(self, has_goat=True)
    return replace(self, has_pickaxe=True)

  def CanCrossWater(self) -> bool:
    return self.has_boat

  def CanCrossMountains(self) -> bool:
    return self.has_goat or self.has_pickaxe

  def ToString(self) -> str:
    names = [item.value for item in PlacedItem if self.Has(item)]
    return ", ".join(names) if names else "nothing"
