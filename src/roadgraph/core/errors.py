"""
Custom exception hierarchy for Roadgraph.

This module defines the exceptions raised for structural misuse of the
road graph and route search API. Search outcomes (unknown vertex,
unreachable goal) are not exceptions and are reported through return
values instead.
"""

from typing import Any, Dict, List, Optional


class RoadgraphException(Exception):
    """
    Base exception for all Roadgraph-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize RoadgraphException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class InvalidArgumentError(RoadgraphException):
    """
    Raised when a search is called with a missing start or goal point,
    or with an algorithm name that does not exist.
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize InvalidArgumentError.

        Args:
            message: User-friendly error message
            argument: Name of the offending argument
            details: Technical details about the failure
            suggestions: List of suggestions for fixing the call
        """
        error_details = details or {}
        if argument:
            error_details["argument"] = argument

        super().__init__(
            message=message,
            error_code="INVALID_ARGUMENT",
            details=error_details,
            suggestions=suggestions or ["Pass a GeographicPoint for both start and goal"],
        )


class PreconditionViolationError(RoadgraphException):
    """
    Raised when a graph mutation breaks a structural precondition.

    Used when an edge references a point that was never added as a
    vertex, or when an edge length is negative.
    """

    def __init__(
        self,
        message: str,
        point: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize PreconditionViolationError.

        Args:
            message: User-friendly error message
            point: The point that violated the precondition, if any
            details: Technical details about the violation
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if point is not None:
            error_details["point"] = str(point)

        default_suggestions = [
            "Add both endpoints with add_vertex before calling add_edge",
            "Ensure edge lengths are non-negative",
        ]

        super().__init__(
            message=message,
            error_code="PRECONDITION_VIOLATION",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class PathReconstructionError(RoadgraphException):
    """
    Raised when a predecessor map does not connect the goal back to the start.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code="PATH_RECONSTRUCTION_ERROR",
            details=details,
            suggestions=suggestions or ["Only reconstruct paths from a successful search"],
        )


class MapLoadError(RoadgraphException):
    """
    Raised when a road map file cannot be read or parsed.

    Attributes carry the file path and the offending line number, when known.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize MapLoadError.

        Args:
            message: User-friendly error message
            file_path: Path of the map file
            line_number: Line number where parsing failed
            details: Technical details about the parse error
            suggestions: List of suggestions for fixing the map file
        """
        error_details = details or {}
        if file_path:
            error_details["file_path"] = file_path
        if line_number is not None:
            error_details["line_number"] = line_number

        default_suggestions = [
            'Each line must read: lat1 lon1 lat2 lon2 "road name" road_type',
            "Check that coordinates are valid numbers",
        ]

        super().__init__(
            message=message,
            error_code="MAP_LOAD_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class ConfigurationError(RoadgraphException):
    """
    Raised when routing configuration is invalid.

    Used for inverted rush-hour windows or non-positive cost multipliers.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check ROADGRAPH_ environment variables are set correctly",
            "Verify rush-hour windows start before they end",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
