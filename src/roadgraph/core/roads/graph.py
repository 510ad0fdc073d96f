"""
Directed road graph of intersections and street segments.

Vertices are road intersections identified by their geographic point.
Edges are directed street segments carrying a road name, a road
classification and a length in kilometres. Several segments may join the
same ordered pair of intersections.
"""

import math
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Set, Union

try:
    import networkx as nx
except ImportError:
    raise ImportError(
        "NetworkX is required for road graph storage. "
        "Install it with: pip install networkx"
    )

from roadgraph.core.errors import PreconditionViolationError
from roadgraph.core.geography import GeographicPoint


class RoadType(str, Enum):
    """Road classification types found in map data."""

    UNKNOWN = "unknown"
    RESIDENTIAL = "residential"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    MOTORWAY = "motorway"
    MOTORWAY_LINK = "motorway_link"
    TRUNK = "trunk"
    UNCLASSIFIED = "unclassified"
    LIVING_STREET = "living_street"
    SERVICE = "service"

    @classmethod
    def from_value(cls, value: Any) -> "RoadType":
        """
        Normalize a road type given as enum member or free-form string.

        Args:
            value: Road type, e.g. "residential" or "Residential"

        Returns:
            Matching RoadType, UNKNOWN if the value is empty, not a string or unmapped
        """
        if isinstance(value, RoadType):
            return value
        if not isinstance(value, str) or not value.strip():
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class MapEdge:
    """
    Directed street segment between two intersections.

    Edges are values: two edges with identical fields are the same edge.

    Attributes:
        start: Point the segment leaves from
        end: Point the segment arrives at
        road_name: Street name
        road_type: Road classification
        length: Segment length in kilometres
    """

    start: GeographicPoint
    end: GeographicPoint
    road_name: str
    road_type: RoadType
    length: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert edge to dictionary."""
        return {
            "from": [self.start.latitude, self.start.longitude],
            "to": [self.end.latitude, self.end.longitude],
            "road_name": self.road_name,
            "road_type": self.road_type.value,
            "length": float(self.length),
        }


class MapGraph:
    """
    Directed multigraph of road intersections.

    The graph is populated once (typically by a map loader) and then
    searched. Search state never lives on the graph, so any number of
    searches may share one instance as long as nobody mutates it meanwhile.
    """

    def __init__(self) -> None:
        """Create an empty road graph."""
        self.graph: nx.MultiDiGraph = nx.MultiDiGraph()

    def add_vertex(self, point: Optional[GeographicPoint]) -> bool:
        """
        Add an intersection at a geographic point.

        Args:
            point: Location of the intersection

        Returns:
            True if a vertex was added, False if the point is missing,
            not a GeographicPoint, or already in the graph
        """
        if not isinstance(point, GeographicPoint):
            return False
        if point in self.graph:
            return False

        self.graph.add_node(point)
        return True

    def add_edge(
        self,
        start: GeographicPoint,
        end: GeographicPoint,
        road_name: str,
        road_type: Union[RoadType, str],
        length: float,
    ) -> MapEdge:
        """
        Add a directed street segment from start to end.

        Args:
            start: Starting point, must already be a vertex
            end: Ending point, must already be a vertex
            road_name: Street name
            road_type: Road classification (enum member or string)
            length: Segment length in kilometres

        Returns:
            The stored MapEdge

        Raises:
            PreconditionViolationError: If an endpoint is not a vertex or
                the length is negative or not finite
        """
        if start is None or start not in self.graph:
            raise PreconditionViolationError(
                f"add_edge: start point {start} is not in graph", point=start
            )
        if end is None or end not in self.graph:
            raise PreconditionViolationError(
                f"add_edge: end point {end} is not in graph", point=end
            )
        if not math.isfinite(length) or length < 0:
            raise PreconditionViolationError(
                f"add_edge: length must be finite and non-negative, got {length}",
                details={"length": length},
            )

        edge = MapEdge(
            start=start,
            end=end,
            road_name=road_name,
            road_type=RoadType.from_value(road_type),
            length=float(length),
        )

        # Keyed by the edge value: an identical segment is stored once
        self.graph.add_edge(start, end, key=edge, edge=edge)

        return edge

    def has_vertex(self, point: Optional[GeographicPoint]) -> bool:
        """Check whether a point is a vertex of the graph."""
        return point is not None and point in self.graph

    def out_edges(self, point: GeographicPoint) -> List[MapEdge]:
        """
        Get the segments leaving a vertex.

        Args:
            point: Vertex location

        Returns:
            Outgoing edges in insertion order (empty for unknown points)
        """
        if not self.has_vertex(point):
            return []

        return [key for _, _, key in self.graph.out_edges(point, keys=True)]

    def get_neighbors(self, point: GeographicPoint) -> Set[GeographicPoint]:
        """
        Get the vertices reachable from a vertex over one segment.

        Args:
            point: Vertex location

        Returns:
            Set of neighbor points (empty for unknown points)
        """
        if not self.has_vertex(point):
            return set()

        return set(self.graph.successors(point))

    def vertex_count(self) -> int:
        """Get the number of intersections."""
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        """Get the number of street segments."""
        return self.graph.number_of_edges()

    def vertices(self) -> Set[GeographicPoint]:
        """Get all intersection points."""
        return set(self.graph.nodes)

    def edges(self) -> Iterator[MapEdge]:
        """Iterate over all street segments."""
        for _, _, key in self.graph.edges(keys=True):
            yield key

    def __contains__(self, point: object) -> bool:
        return point in self.graph

    def __len__(self) -> int:
        return self.vertex_count()

    def find_nearest_vertex(self, point: GeographicPoint) -> Optional[GeographicPoint]:
        """
        Find the vertex closest to an arbitrary location.

        Args:
            point: Location to snap

        Returns:
            Nearest vertex, or None if the graph is empty
        """
        nearest: Optional[GeographicPoint] = None
        min_dist = float("inf")

        for vertex in self.graph.nodes:
            dist = point.distance(vertex)
            if dist < min_dist:
                min_dist = dist
                nearest = vertex

        return nearest

    def get_graph_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the road graph.

        Returns:
            Dictionary with graph statistics
        """
        num_vertices = self.vertex_count()
        if num_vertices == 0:
            return {
                "num_vertices": 0,
                "num_edges": 0,
                "is_weakly_connected": False,
                "num_components": 0,
                "avg_out_degree": 0.0,
                "edges_by_road_type": {},
            }

        road_types = Counter(edge.road_type.value for edge in self.edges())

        return {
            "num_vertices": num_vertices,
            "num_edges": self.edge_count(),
            "is_weakly_connected": nx.is_weakly_connected(self.graph),
            "num_components": nx.number_weakly_connected_components(self.graph),
            "avg_out_degree": self.edge_count() / num_vertices,
            "edges_by_road_type": dict(road_types),
        }

    def export_to_geojson(self) -> Dict[str, Any]:
        """
        Export graph to GeoJSON format.

        Returns:
            GeoJSON FeatureCollection with one Point per vertex and one
            LineString per segment
        """
        features = []

        for vertex in self.graph.nodes:
            features.append(
                {
                    "type": "Feature",
                    "geometry": {"type": "Point", "coordinates": list(vertex.as_lon_lat())},
                    "properties": {"type": "vertex"},
                }
            )

        for edge in self.edges():
            features.append(
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [
                            list(edge.start.as_lon_lat()),
                            list(edge.end.as_lon_lat()),
                        ],
                    },
                    "properties": {
                        "road_name": edge.road_name,
                        "road_type": edge.road_type.value,
                        "length": edge.length,
                        "type": "edge",
                    },
                }
            )

        return {"type": "FeatureCollection", "features": features}
