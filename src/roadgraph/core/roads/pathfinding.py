"""
Route search over a road graph.

This module implements:
- Breadth-first search (fewest road segments)
- One weighted best-first search serving both Dijkstra and A*
- Path reconstruction from a predecessor map

All search state (distances, heuristic estimates, frontier, settled set)
is local to a single call, so searches never interfere with each other.
"""

import heapq
import itertools
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional, Set, Tuple

from shapely.geometry import LineString

from roadgraph.core.errors import InvalidArgumentError, PathReconstructionError
from roadgraph.core.geography import GeographicPoint
from roadgraph.core.roads.cost import RushHourPolicy
from roadgraph.core.roads.graph import MapEdge, MapGraph
from roadgraph.utils.logging import PerformanceTimer

logger = logging.getLogger(__name__)

Visitor = Callable[[GeographicPoint], None]
Predecessors = Dict[GeographicPoint, GeographicPoint]
Arrivals = Dict[GeographicPoint, MapEdge]


class RouteStatus(str, Enum):
    """Outcome of a route search."""

    FOUND = "found"
    UNKNOWN_VERTEX = "unknown_vertex"
    UNREACHABLE = "unreachable"


ALGORITHMS = ("bfs", "dijkstra", "a_star")


@dataclass
class RouteResult:
    """
    Result of a route search.

    Attributes:
        status: Whether a route was found, and if not, why
        algorithm: Name of the algorithm used
        path: Points from start to goal inclusive (empty unless found)
        edges: Segments the search followed, one per hop
        total_length: Sum of base lengths of those segments (km)
        nodes_visited: Number of nodes handed to the visitor
        metadata: Additional result metadata
    """

    status: RouteStatus
    algorithm: str
    path: List[GeographicPoint] = field(default_factory=list)
    edges: List[MapEdge] = field(default_factory=list)
    total_length: float = 0.0
    nodes_visited: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """Whether a route was found."""
        return self.status == RouteStatus.FOUND

    @property
    def hop_count(self) -> int:
        """Number of road segments in the route."""
        return max(len(self.path) - 1, 0)

    def get_geometry(self) -> LineString:
        """
        Get route as Shapely LineString in lon/lat order.

        Returns:
            LineString geometry (empty if fewer than two points)
        """
        if len(self.path) < 2:
            return LineString()

        return LineString([point.as_lon_lat() for point in self.path])

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "status": self.status.value,
            "algorithm": self.algorithm,
            "num_points": len(self.path),
            "hop_count": self.hop_count,
            "total_length": float(self.total_length),
            "nodes_visited": self.nodes_visited,
            "waypoints": [[p.latitude, p.longitude] for p in self.path],
            "roads": [edge.road_name for edge in self.edges],
            "metadata": self.metadata,
        }


def reconstruct_path(
    predecessors: Predecessors,
    start: GeographicPoint,
    goal: GeographicPoint,
) -> List[GeographicPoint]:
    """
    Walk a predecessor map from goal back to start.

    Args:
        predecessors: Mapping of each reached point to the point it was reached from
        start: Starting point
        goal: Goal point

    Returns:
        Points from start to goal inclusive

    Raises:
        PathReconstructionError: If the chain from goal does not reach start
    """
    path = [goal]
    seen = {goal}
    current = goal

    while current != start:
        if current not in predecessors:
            raise PathReconstructionError(
                f"No predecessor recorded for {current}",
                details={"start": str(start), "goal": str(goal)},
            )
        current = predecessors[current]
        if current in seen:
            raise PathReconstructionError(
                f"Predecessor chain revisits {current}",
                details={"start": str(start), "goal": str(goal)},
            )
        seen.add(current)
        path.append(current)

    path.reverse()
    return path


def breadth_first_search(
    graph: MapGraph,
    start: GeographicPoint,
    goal: GeographicPoint,
    visitor: Optional[Visitor] = None,
) -> Tuple[bool, Predecessors, int, Arrivals]:
    """
    Unweighted search by number of road segments.

    Neighbors are marked visited and given a predecessor when they are
    enqueued, so no point is ever enqueued twice.

    Args:
        graph: Road graph
        start: Starting vertex
        goal: Goal vertex
        visitor: Called with each dequeued point

    Returns:
        (found, predecessors, nodes visited, edge used to reach each point)
    """
    parents: Predecessors = {}
    arrivals: Arrivals = {}
    visited: Set[GeographicPoint] = {start}
    to_explore: Deque[GeographicPoint] = deque([start])
    count = 0

    while to_explore:
        current = to_explore.popleft()
        count += 1
        if visitor is not None:
            visitor(current)

        if current == goal:
            return True, parents, count, arrivals

        for edge in graph.out_edges(current):
            neighbor = edge.end
            if neighbor not in visited:
                visited.add(neighbor)
                parents[neighbor] = current
                arrivals[neighbor] = edge
                to_explore.append(neighbor)

    return False, parents, count, arrivals


def best_first_search(
    graph: MapGraph,
    start: GeographicPoint,
    goal: GeographicPoint,
    visitor: Optional[Visitor] = None,
    use_heuristic: bool = True,
    at: Optional[datetime] = None,
    policy: Optional[RushHourPolicy] = None,
) -> Tuple[bool, Predecessors, int, Arrivals]:
    """
    Weighted search shared by Dijkstra and A*.

    The frontier is ordered by ``from_start + to_goal``. With the heuristic
    disabled ``to_goal`` is zero everywhere and the search is Dijkstra.
    Superseded frontier entries are skipped when popped.

    Args:
        graph: Road graph
        start: Starting vertex
        goal: Goal vertex
        visitor: Called with each settled point
        use_heuristic: Estimate remaining cost by straight-line distance (A*)
        at: Point in time for the rush-hour adjustment; None disables it
        policy: Rush-hour policy (built from settings when omitted)

    Returns:
        (found, predecessors, nodes visited, edge used to reach each point)
    """
    policy = policy or RushHourPolicy.from_settings()

    from_start: Dict[GeographicPoint, float] = {}
    to_goal: Dict[GeographicPoint, float] = {}
    for vertex in graph.vertices():
        from_start[vertex] = float("inf")
        to_goal[vertex] = vertex.distance(goal) if use_heuristic else 0.0

    parents: Predecessors = {}
    arrivals: Arrivals = {}
    settled: Set[GeographicPoint] = set()
    # Insertion counter breaks ties between equal priorities
    tiebreak = itertools.count()
    frontier: List[Tuple[float, int, GeographicPoint]] = []

    from_start[start] = 0.0
    heapq.heappush(frontier, (to_goal[start], next(tiebreak), start))
    count = 0

    while frontier:
        _, _, current = heapq.heappop(frontier)

        # Stale entry
        if current in settled:
            continue

        settled.add(current)
        count += 1
        if visitor is not None:
            visitor(current)

        if current == goal:
            return True, parents, count, arrivals

        for edge in graph.out_edges(current):
            neighbor = edge.end
            if neighbor in settled:
                continue

            candidate = from_start[current] + edge.length
            candidate = policy.adjust(candidate, edge.road_type, at)

            if candidate + to_goal[neighbor] < from_start[neighbor] + to_goal[neighbor]:
                from_start[neighbor] = candidate
                parents[neighbor] = current
                arrivals[neighbor] = edge
                heapq.heappush(
                    frontier,
                    (candidate + to_goal[neighbor], next(tiebreak), neighbor),
                )

    return False, parents, count, arrivals


class RoutePlanner:
    """
    Computes routes between intersections of a road graph.

    The plain search methods (``bfs``, ``dijkstra``, ``a_star``) return the
    list of points or None when there is no route. ``find_route`` returns a
    RouteResult that tells an unknown vertex apart from an unreachable goal.
    """

    def __init__(self, graph: MapGraph, policy: Optional[RushHourPolicy] = None):
        """
        Initialize the planner.

        Args:
            graph: Road graph to search
            policy: Rush-hour policy (uses settings if not provided)
        """
        self.graph = graph
        self.policy = policy or RushHourPolicy.from_settings()

    def bfs(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        visitor: Optional[Visitor] = None,
    ) -> Optional[List[GeographicPoint]]:
        """
        Find the route with the fewest road segments.

        Args:
            start: Starting location
            goal: Goal location
            visitor: Optional hook called with each visited point

        Returns:
            Points from start to goal inclusive, or None if there is no route
        """
        return self._path_or_none(self.find_route(start, goal, "bfs", visitor))

    def dijkstra(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        visitor: Optional[Visitor] = None,
        at: Optional[datetime] = None,
    ) -> Optional[List[GeographicPoint]]:
        """
        Find the cheapest route using Dijkstra's algorithm.

        Args:
            start: Starting location
            goal: Goal location
            visitor: Optional hook called with each visited point
            at: Point in time for rush-hour costs; None uses plain lengths

        Returns:
            Points from start to goal inclusive, or None if there is no route
        """
        return self._path_or_none(self.find_route(start, goal, "dijkstra", visitor, at))

    def a_star(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        visitor: Optional[Visitor] = None,
        at: Optional[datetime] = None,
    ) -> Optional[List[GeographicPoint]]:
        """
        Find the cheapest route using A* with a straight-line heuristic.

        Optimality is only guaranteed when ``at`` is None.

        Args:
            start: Starting location
            goal: Goal location
            visitor: Optional hook called with each visited point
            at: Point in time for rush-hour costs; None uses plain lengths

        Returns:
            Points from start to goal inclusive, or None if there is no route
        """
        return self._path_or_none(self.find_route(start, goal, "a_star", visitor, at))

    def find_route(
        self,
        start: GeographicPoint,
        goal: GeographicPoint,
        algorithm: str = "a_star",
        visitor: Optional[Visitor] = None,
        at: Optional[datetime] = None,
    ) -> RouteResult:
        """
        Search for a route and report how the search ended.

        Args:
            start: Starting location
            goal: Goal location
            algorithm: One of "bfs", "dijkstra", "a_star"
            visitor: Optional hook called with each visited point
            at: Point in time for rush-hour costs (ignored by bfs)

        Returns:
            RouteResult with status FOUND, UNKNOWN_VERTEX or UNREACHABLE

        Raises:
            InvalidArgumentError: If start or goal is None, or the algorithm
                is not recognized
        """
        if start is None or goal is None:
            raise InvalidArgumentError(
                "Cannot find route from or to null node",
                argument="start" if start is None else "goal",
            )
        if algorithm not in ALGORITHMS:
            raise InvalidArgumentError(
                f"Unknown search algorithm: {algorithm}",
                argument="algorithm",
                suggestions=[f"Use one of: {', '.join(ALGORITHMS)}"],
            )

        if not self.graph.has_vertex(start):
            logger.warning(f"Start node {start} does not exist")
            return RouteResult(status=RouteStatus.UNKNOWN_VERTEX, algorithm=algorithm)
        if not self.graph.has_vertex(goal):
            logger.warning(f"End node {goal} does not exist")
            return RouteResult(status=RouteStatus.UNKNOWN_VERTEX, algorithm=algorithm)

        with PerformanceTimer(f"{algorithm} search"):
            if algorithm == "bfs":
                found, parents, visited, arrivals = breadth_first_search(
                    self.graph, start, goal, visitor
                )
            else:
                found, parents, visited, arrivals = best_first_search(
                    self.graph,
                    start,
                    goal,
                    visitor=visitor,
                    use_heuristic=algorithm == "a_star",
                    at=at,
                    policy=self.policy,
                )

        logger.debug(
            f"{algorithm} visited {visited} nodes",
            extra={"algorithm": algorithm, "nodes_visited": visited, "found": found},
        )

        if not found:
            logger.warning(f"No path found from {start} to {goal}")
            return RouteResult(
                status=RouteStatus.UNREACHABLE,
                algorithm=algorithm,
                nodes_visited=visited,
            )

        path = reconstruct_path(parents, start, goal)
        edges = [arrivals[point] for point in path[1:]]
        metadata: Dict[str, Any] = {}
        if at is not None and algorithm != "bfs":
            metadata["rush_hour"] = self.policy.is_rush_hour(at)

        return RouteResult(
            status=RouteStatus.FOUND,
            algorithm=algorithm,
            path=path,
            edges=edges,
            total_length=sum(edge.length for edge in edges),
            nodes_visited=visited,
            metadata=metadata,
        )

    def path_length(self, path: List[GeographicPoint]) -> float:
        """
        Shortest base length of a sequence of points.

        Between each consecutive pair the shortest connecting segment counts,
        which can differ from ``RouteResult.total_length`` when a rush-hour
        search preferred a longer parallel residential segment.

        Args:
            path: Consecutive points joined by road segments

        Returns:
            Total length in kilometres

        Raises:
            InvalidArgumentError: If two consecutive points are not joined
        """
        total = 0.0
        for here, there in zip(path, path[1:]):
            lengths = [edge.length for edge in self.graph.out_edges(here) if edge.end == there]
            if not lengths:
                raise InvalidArgumentError(
                    f"No road segment from {here} to {there}",
                    argument="path",
                )
            total += min(lengths)
        return total

    @staticmethod
    def _path_or_none(result: RouteResult) -> Optional[List[GeographicPoint]]:
        return result.path if result.found else None
