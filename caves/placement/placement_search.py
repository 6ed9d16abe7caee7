"""Bounded random-sampling search for spawn points and item cells.

Each search samples uniformly random cells and accepts the first one that
satisfies its predicate. This is greedy, not globally optimal: it may miss a
valid cell that exists if the try budget runs out first, in which case the
search reports None and the caller decides what to do next (regenerate,
relax the threshold, or give up on the level).
"""

import logging as log
from typing import Callable, Container, Optional

from rng.random_number_generator import RandomNumberGenerator

from ..constants import NEIGHBOR_OFFSETS, CellKind
from ..grid import Grid, Position
from ..inventory import Inventory
from ..movement_policy import MovementPolicy, WalkabilityGraph
from ..reachability import ReachabilityAnalyzer

CellPredicate = Callable[[CellKind], bool]


class PlacementSearch:
    """Finds spawn and item cells with a bounded number of random samples."""

    def __init__(self, rng: RandomNumberGenerator, max_tries: int = 1000):
        """Initialize the search.

        Args:
            rng: Seeded random source used for every sample
            max_tries: Default sample budget per search, at least 1

        Raises:
            ValueError: If max_tries is not a positive integer
        """
        self.rng = rng
        self.max_tries = self._CheckTries(max_tries)
        self.analyzer = ReachabilityAnalyzer()

    def FindSpawn(
        self,
        grid: Grid,
        inventory: Inventory,
        min_reachable: int,
        max_tries: Optional[int] = None,
        policy: Optional[MovementPolicy] = None
    ) -> Optional[Position]:
        """Find a cell from which at least min_reachable cells can be reached.

        Args:
            grid: Finished level grid
            inventory: Inventory the player starts with
            min_reachable: Required component size, also used as the BFS cap
            max_tries: Sample budget, defaults to the search's own budget
            policy: Movement rules, defaults to plain MovementPolicy()

        Returns:
            The first qualifying position, or None if the budget ran out
        """
        if min_reachable < 1:
            raise ValueError(f"Minimum reachable tiles must be at least 1, got {min_reachable}")
        tries = self._ResolveTries(max_tries)
        graph = WalkabilityGraph(grid, inventory, policy)

        for attempt in range(tries):
            candidate = Position(*self.rng.random_cell(grid.width, grid.height))
            reachable = self.analyzer.CountReachable(graph, candidate, min_reachable)
            if reachable >= min_reachable:
                log.info(f"Placed spawn at {tuple(candidate)} with {reachable} reachable tiles "
                         f"after {attempt + 1} attempts")
                return candidate

        log.warning(f"Could not find a spawn point with {min_reachable} reachable tiles "
                    f"after {tries} attempts")
        return None

    def FindCellWithNeighborMatching(
        self,
        grid: Grid,
        cell_predicate: CellPredicate,
        neighbor_predicate: CellPredicate,
        max_tries: Optional[int] = None,
        excluded: Container[Position] = ()
    ) -> Optional[Position]:
        """Find a cell matching cell_predicate with an axis-aligned neighbor matching neighbor_predicate.

        Used for context-sensitive items such as a boat next to water, without a graph search.

        Args:
            grid: Level grid to search
            cell_predicate: Condition on the candidate cell's own kind
            neighbor_predicate: Condition at least one of its 4 neighbors must meet
            max_tries: Sample budget, defaults to the search's own budget
            excluded: Positions that are already taken

        Returns:
            The first qualifying position, or None if the budget ran out
        """
        tries = self._ResolveTries(max_tries)
        for _ in range(tries):
            candidate = Position(*self.rng.random_cell(grid.width, grid.height))
            if candidate in excluded:
                continue
            kind = grid.GetKind(candidate)
            if kind is None or not cell_predicate(kind):
                continue
            if self.HasNeighborMatching(grid, candidate, neighbor_predicate):
                return candidate

        log.warning(f"No cell with a matching neighbor found after {tries} attempts")
        return None

    def FindRandomCell(
        self,
        grid: Grid,
        cell_predicate: CellPredicate,
        max_tries: Optional[int] = None,
        excluded: Container[Position] = ()
    ) -> Optional[Position]:
        """Find any cell whose kind matches cell_predicate."""
        tries = self._ResolveTries(max_tries)
        for _ in range(tries):
            candidate = Position(*self.rng.random_cell(grid.width, grid.height))
            if candidate in excluded:
                continue
            kind = grid.GetKind(candidate)
            if kind is not None and cell_predicate(kind):
                return candidate

        log.warning(f"No matching cell found after {tries} attempts")
        return None

    @staticmethod
    def HasNeighborMatching(grid: Grid, position: Position, predicate: CellPredicate) -> bool:
        for dx, dy in NEIGHBOR_OFFSETS:
            kind = grid.GetKind(position.Offset(dx, dy))
            if kind is not None and predicate(kind):
                return True
        return False

    def _ResolveTries(self, max_tries: Optional[int]) -> int:
        if max_tries is None:
            return self.max_tries
        return self._CheckTries(max_tries)

    @staticmethod
    def _CheckTries(max_tries: int) -> int:
        if isinstance(max_tries, bool) or not isinstance(max_tries, int) or max_tries < 1:
            raise ValueError(f"Maximum placement tries must be a positive integer, got {max_tries!r}")
        return max_tries
