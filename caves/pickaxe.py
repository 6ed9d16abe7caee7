import logging as log
from typing import Optional

from .constants import CellKind
from .grid import Position, TileLookup
from .inventory import Inventory
from .movement_policy import MovementPolicy


def dig(lookup: TileLookup, position: Position, inventory: Inventory,
        policy: Optional[MovementPolicy] = None) -> bool:
  """Turn the mountain at position into floor if the player carries a pickaxe.

  Only the target cell ever changes, and the inventory is left untouched.

  Returns:
    True if the cell was dug out, False if nothing changed
  """
  if not inventory.has_pickaxe:
    log.debug(f"Pickaxe: no pickaxe, cannot dig at {tuple(position)}")
    return False

  policy = policy if policy is not None else MovementPolicy()
  kind = lookup.GetKind(position)
  if not policy.IsMountain(kind):
    log.debug(f"Pickaxe: no mountain to dig at {tuple(position)}")
    return False

  lookup.SetKind(position, CellKind.FLOOR)
  log.info(f"Pickaxe: turned mountain into floor at {tuple(position)}")
  return True
