"""
Tests for logging setup and performance helpers.
"""

import json
import logging
import time

import pytest

from roadgraph.core.geography import GeographicPoint
from roadgraph.core.logging_config import (
    PACKAGE_LOGGER,
    JSONFormatter,
    get_log_level,
    setup_logging,
)
from roadgraph.core.roads.graph import MapGraph
from roadgraph.core.roads.pathfinding import RoutePlanner
from roadgraph.utils.logging import PerformanceTimer, log_performance


@pytest.fixture
def package_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


@pytest.fixture
def two_point_graph():
    """Create a graph with one segment between two points."""
    graph = MapGraph()
    a, b = GeographicPoint(0.0, 0.0), GeographicPoint(0.0, 0.01)
    graph.add_vertex(a)
    graph.add_vertex(b)
    graph.add_edge(a, b, "Elm street", "residential", 1.2)
    return graph, a, b


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        """Test level names map to constants, unknown names to INFO."""
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("WARNING") == logging.WARNING
        assert get_log_level("verbose") == logging.INFO

    def test_configures_package_logger_only(self, package_logger):
        """Test handlers go on the package logger and not the root logger."""
        root_handlers = list(logging.getLogger().handlers)

        logger = setup_logging(log_level="DEBUG")

        assert logger is package_logger
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_setup_replaces_handlers(self, package_logger, tmp_path):
        """Test calling setup twice does not stack handlers."""
        setup_logging(log_file=tmp_path / "a.log")
        setup_logging(log_file=tmp_path / "b.log")

        assert len(package_logger.handlers) == 2

    def test_json_file_carries_search_fields(self, package_logger, tmp_path, two_point_graph):
        """Test a search writes its algorithm and visit count to the JSON log."""
        graph, a, b = two_point_graph
        log_file = tmp_path / "logs" / "routes.log"
        setup_logging(log_level="DEBUG", log_file=log_file, json_logs=True, enable_console=False)

        RoutePlanner(graph).dijkstra(a, b)
        for handler in package_logger.handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        search = [r for r in records if r["message"] == "dijkstra visited 2 nodes"]
        assert search[0]["algorithm"] == "dijkstra"
        assert search[0]["nodes_visited"] == 2
        assert search[0]["found"] is True
        assert any("duration_ms" in r for r in records)


class TestJSONFormatter:
    """Tests for the JSON formatter."""

    def test_standard_fields(self):
        """Test the base fields and absence of record internals."""
        record = logging.makeLogRecord(
            {"name": "roadgraph.core.roads.pathfinding", "levelname": "WARNING", "msg": "No path"}
        )

        data = json.loads(JSONFormatter().format(record))

        assert data["logger"] == "roadgraph.core.roads.pathfinding"
        assert data["level"] == "WARNING"
        assert data["message"] == "No path"
        assert "args" not in data
        assert "msecs" not in data


class TestPerformanceHelpers:
    """Tests for performance timing."""

    def test_log_performance(self, caplog):
        """Test the decorator logs execution time and keeps the return value."""

        @log_performance(log_level=logging.INFO)
        def load():
            return "done"

        with caplog.at_level(logging.INFO):
            assert load() == "done"

        assert "executed in" in caplog.text

    def test_log_performance_threshold(self, caplog):
        """Test fast calls under the threshold are not logged."""

        @log_performance(log_level=logging.INFO, threshold_ms=1000)
        def load():
            return "done"

        with caplog.at_level(logging.INFO):
            load()

        assert "executed in" not in caplog.text

    def test_performance_timer(self):
        """Test the timer records elapsed time."""
        with PerformanceTimer("load") as timer:
            time.sleep(0.02)

        assert timer.duration_ms >= 15

    def test_search_is_timed(self, caplog, two_point_graph):
        """Test route searches log their duration and visit count at debug level."""
        graph, a, _ = two_point_graph

        with caplog.at_level(logging.DEBUG):
            RoutePlanner(graph).dijkstra(a, a)

        assert "dijkstra search completed" in caplog.text
        assert "dijkstra visited 1 nodes" in caplog.text
