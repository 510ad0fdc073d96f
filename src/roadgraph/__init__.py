"""
Roadgraph - route planning over road intersection graphs.

This package provides a directed road graph, breadth-first and weighted
(Dijkstra / A*) route search, and a rush-hour aware cost model.
"""

__version__ = "0.1.0"
