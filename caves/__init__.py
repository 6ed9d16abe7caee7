"""Procedural cave levels with inventory-gated movement.

Public surface: generation (cave + water), movement rules, bounded
reachability, placement search, digging and the level builder that ties them
together.
"""

from .constants import CellKind, PlacedItem, WATER_KINDS, NEIGHBOR_OFFSETS, DEFAULT_SEED
from .grid import Grid, Position, TileLookup
from .inventory import Inventory
from .generation import CaveGenerator, WaterClusterGenerator, apply_water_overlay
from .movement_policy import MovementPolicy, WalkabilityGraph
from .reachability import ReachabilityAnalyzer
from .placement import PlacementSearch
from .pickaxe import dig
from .validator import LevelValidator
from .level_builder import GeneratedLevel, LevelBuilder

__all__ = [
    "CellKind",
    "PlacedItem",
    "WATER_KINDS",
    "NEIGHBOR_OFFSETS",
    "DEFAULT_SEED",
    "Grid",
    "Position",
    "TileLookup",
    "Inventory",
    "CaveGenerator",
    "WaterClusterGenerator",
    "apply_water_overlay",
    "MovementPolicy",
    "WalkabilityGraph",
    "ReachabilityAnalyzer",
    "PlacementSearch",
    "dig",
    "LevelValidator",
    "GeneratedLevel",
    "LevelBuilder",
]
