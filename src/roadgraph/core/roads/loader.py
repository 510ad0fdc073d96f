"""
Loader for plain-text road map files.

Each non-blank line describes one directed road segment::

    lat1 lon1 lat2 lon2 "road name" road_type

Both endpoints become vertices and the segment length is the distance
between them. Lines starting with ``#`` are comments.
"""

import logging
import math
import re
from pathlib import Path
from typing import Optional, Tuple, Union

from roadgraph.core.errors import MapLoadError
from roadgraph.core.geography import GeographicPoint
from roadgraph.core.roads.graph import MapGraph
from roadgraph.utils.logging import log_performance

logger = logging.getLogger(__name__)

SEGMENT_PATTERN = re.compile(
    r'^\s*(?P<lat1>\S+)\s+(?P<lon1>\S+)\s+(?P<lat2>\S+)\s+(?P<lon2>\S+)'
    r'\s+"(?P<name>[^"]*)"\s+(?P<type>\S+)\s*$'
)

Segment = Tuple[GeographicPoint, GeographicPoint, str, str]


def parse_segment(line: str, line_number: Optional[int] = None) -> Segment:
    """
    Parse one map line.

    Args:
        line: Line of the map file
        line_number: Line number, used in error details

    Returns:
        (start, end, road name, road type)

    Raises:
        MapLoadError: If the line is malformed
    """
    match = SEGMENT_PATTERN.match(line)
    if match is None:
        raise MapLoadError(
            f"Malformed road segment: {line.strip()!r}",
            line_number=line_number,
        )

    try:
        coords = [float(match[key]) for key in ("lat1", "lon1", "lat2", "lon2")]
    except ValueError as e:
        raise MapLoadError(
            f"Invalid coordinate in road segment: {e}",
            line_number=line_number,
        ) from e

    # float() accepts "nan" and "inf"
    if not all(math.isfinite(c) for c in coords):
        raise MapLoadError(
            f"Invalid coordinate in road segment: non-finite value in {line.strip()!r}",
            line_number=line_number,
        )

    start = GeographicPoint(coords[0], coords[1])
    end = GeographicPoint(coords[2], coords[3])

    return start, end, match["name"], match["type"]


@log_performance(log_level=logging.INFO)
def load_road_map(path: Union[str, Path], graph: Optional[MapGraph] = None) -> MapGraph:
    """
    Load a road map file into a graph.

    Args:
        path: Map file to read
        graph: Graph to populate (a new one is created if not provided)

    Returns:
        The populated graph

    Raises:
        MapLoadError: If the file cannot be read or a line is malformed
    """
    path = Path(path)
    graph = graph if graph is not None else MapGraph()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MapLoadError(f"Cannot read map file: {e}", file_path=str(path)) from e

    segments = 0
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        try:
            start, end, road_name, road_type = parse_segment(line, line_number)
        except MapLoadError as e:
            e.details["file_path"] = str(path)
            raise

        graph.add_vertex(start)
        graph.add_vertex(end)
        graph.add_edge(start, end, road_name, road_type, start.distance(end))
        segments += 1

    logger.info(
        f"Loaded {path.name}: {segments} segments, "
        f"{graph.vertex_count()} vertices, {graph.edge_count()} edges"
    )

    return graph
