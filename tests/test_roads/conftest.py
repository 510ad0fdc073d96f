"""
Shared fixtures for road graph tests.
"""

from pathlib import Path

import pytest

from roadgraph.core.geography import GeographicPoint
from roadgraph.core.roads.graph import MapGraph
from roadgraph.core.roads.loader import load_road_map

MAPS_DIR = Path(__file__).parent.parent / "fixtures" / "maps"


@pytest.fixture
def maps_dir() -> Path:
    """Return the directory holding map fixtures."""
    return MAPS_DIR


@pytest.fixture
def simpletest_graph() -> MapGraph:
    """Load the nine-intersection simpletest map."""
    return load_road_map(MAPS_DIR / "simpletest.map")


@pytest.fixture
def simpletest_endpoints() -> tuple[GeographicPoint, GeographicPoint]:
    """Return the start/goal pair used with the simpletest map."""
    return GeographicPoint(1.0, 1.0), GeographicPoint(8.0, -1.0)


@pytest.fixture
def diamond_graph() -> MapGraph:
    """
    Create a four-intersection graph with two routes from S to G.

    S -> M -> G is residential with total length 4.0.
    S -> N -> G is primary with total length 5.0.
    """
    graph = MapGraph()
    s = GeographicPoint(0.0, 0.0)
    m = GeographicPoint(0.0, 0.01)
    n = GeographicPoint(0.01, 0.0)
    g = GeographicPoint(0.01, 0.01)
    for point in (s, m, n, g):
        graph.add_vertex(point)

    graph.add_edge(s, m, "Elm street", "residential", 2.0)
    graph.add_edge(m, g, "Elm street", "residential", 2.0)
    graph.add_edge(s, n, "Main avenue", "primary", 2.0)
    graph.add_edge(n, g, "Main avenue", "primary", 3.0)

    return graph
