"""
Road graph storage and route search.

This module provides:
- A directed road graph keyed by geographic point
- Breadth-first, Dijkstra and A* route search
- A rush-hour aware cost model for residential roads
- A loader for plain-text road map files
"""

from roadgraph.core.roads.cost import RushHourPolicy, adjust_cost
from roadgraph.core.roads.graph import MapEdge, MapGraph, RoadType
from roadgraph.core.roads.loader import load_road_map
from roadgraph.core.roads.pathfinding import (
    RoutePlanner,
    RouteResult,
    RouteStatus,
    reconstruct_path,
)

__all__ = [
    "MapGraph",
    "MapEdge",
    "RoadType",
    "RushHourPolicy",
    "adjust_cost",
    "load_road_map",
    "RoutePlanner",
    "RouteResult",
    "RouteStatus",
    "reconstruct_path",
]
