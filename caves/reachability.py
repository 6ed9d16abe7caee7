"""Bounded breadth-first search over a walkability graph."""

from collections import deque
import logging as log
from typing import Optional, Protocol, Iterable, Set

from .grid import Position


class Graph(Protocol):

  def IsWalkable(self, position: Position) -> bool:
    ...

  def Neighbors(self, position: Position) -> Iterable[Position]:
    ...


class ReachabilityAnalyzer(object):
  """Answers "is the component around this cell at least N cells big?" cheaply.

  The search stops as soon as it has seen `cap` cells, so the count is exact
  only for components smaller than the cap.
  """

  def CountReachable(self, graph: Graph, start: Position, cap: int) -> int:
    """Count cells reachable from start, stopping once cap cells were seen.

    Returns:
      0 if start is not walkable, otherwise min(component size, cap) for cap >= 1
    """
    if cap < 1:
      raise ValueError(f"Reachability cap must be at least 1, got {cap}")
    return len(self.CollectReachable(graph, start, cap))

  def CollectReachable(self, graph: Graph, start: Position,
                       cap: Optional[int] = None) -> Set[Position]:
    """Visited set of a BFS from start. Without a cap the whole component is explored."""
    if not graph.IsWalkable(start):
      return set()

    visited = {start}
    frontier = deque([start])
    while frontier and (cap is None or len(visited) < cap):
      current = frontier.popleft()
      for neighbor in graph.Neighbors(current):
        if neighbor in visited:
          continue
        visited.add(neighbor)
        frontier.append(neighbor)
        if cap is not None and len(visited) >= cap:
          break

    log.debug(f"BFS from {tuple(start)} visited {len(visited)} cells (cap {cap})")
    return visited
