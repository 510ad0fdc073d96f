"""
Tests for custom exception hierarchy.
"""

from roadgraph.core.errors import (
    ConfigurationError,
    InvalidArgumentError,
    MapLoadError,
    PathReconstructionError,
    PreconditionViolationError,
    RoadgraphException,
)
from roadgraph.core.geography import GeographicPoint


class TestRoadgraphException:
    """Tests for base RoadgraphException class."""

    def test_basic_exception(self):
        """Test basic exception creation."""
        exc = RoadgraphException(
            message="Test error",
            error_code="TEST_ERROR",
        )

        assert str(exc) == "TEST_ERROR: Test error"
        assert exc.message == "Test error"
        assert exc.error_code == "TEST_ERROR"
        assert exc.details == {}
        assert exc.suggestions == []

    def test_to_dict(self):
        """Test conversion to dictionary."""
        exc = RoadgraphException(
            message="Test error",
            error_code="TEST_ERROR",
            details={"key": "value"},
            suggestions=["suggestion"],
        )

        result = exc.to_dict()

        assert result["error_code"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"] == {"key": "value"}
        assert result["suggestions"] == ["suggestion"]

    def test_repr(self):
        """Test string representation."""
        repr_str = repr(RoadgraphException(message="Test error", error_code="TEST_ERROR"))

        assert "RoadgraphException" in repr_str
        assert "TEST_ERROR" in repr_str
        assert "Test error" in repr_str

    def test_subclasses(self):
        """Test every specific error derives from the base class."""
        for cls in (
            InvalidArgumentError,
            PreconditionViolationError,
            PathReconstructionError,
            MapLoadError,
            ConfigurationError,
        ):
            assert issubclass(cls, RoadgraphException)


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError."""

    def test_basic(self):
        """Test error code and argument detail."""
        exc = InvalidArgumentError("Cannot find route from or to null node", argument="start")

        assert exc.error_code == "INVALID_ARGUMENT"
        assert exc.details["argument"] == "start"
        assert exc.suggestions


class TestPreconditionViolationError:
    """Tests for PreconditionViolationError."""

    def test_with_point(self):
        """Test the offending point is recorded."""
        point = GeographicPoint(1.0, 2.0)
        exc = PreconditionViolationError("not in graph", point=point)

        assert exc.error_code == "PRECONDITION_VIOLATION"
        assert exc.details["point"] == "Lat: 1.0, Lon: 2.0"
        assert any("add_vertex" in s for s in exc.suggestions)

    def test_custom_suggestions(self):
        """Test custom suggestions override the defaults."""
        exc = PreconditionViolationError("bad", suggestions=["Fix it"])
        assert exc.suggestions == ["Fix it"]


class TestMapLoadError:
    """Tests for MapLoadError."""

    def test_location_details(self):
        """Test file path and line number details."""
        exc = MapLoadError("Malformed", file_path="utc.map", line_number=12)

        assert exc.error_code == "MAP_LOAD_ERROR"
        assert exc.details == {"file_path": "utc.map", "line_number": 12}

    def test_no_location(self):
        """Test details are empty without a location."""
        assert MapLoadError("Malformed").details == {}


class TestOtherErrors:
    """Tests for the remaining error types."""

    def test_path_reconstruction_error(self):
        """Test error code."""
        exc = PathReconstructionError("broken chain")
        assert exc.error_code == "PATH_RECONSTRUCTION_ERROR"

    def test_configuration_error(self):
        """Test config key detail."""
        exc = ConfigurationError("bad multiplier", config_key="rush_hour_multiplier")

        assert exc.error_code == "CONFIGURATION_ERROR"
        assert exc.details["config_key"] == "rush_hour_multiplier"
