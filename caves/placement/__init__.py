from .placement_search import CellPredicate, PlacementSearch

__all__ = ["CellPredicate", "PlacementSearch"]
