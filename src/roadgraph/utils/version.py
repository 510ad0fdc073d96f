"""
Version utility functions.
"""

from roadgraph import __version__


def get_version() -> str:
    """
    Get the current version of Roadgraph.

    Returns:
        str: The version string.
    """
    return __version__


def format_version_info() -> dict[str, str]:
    """
    Get formatted version information.

    Returns:
        dict[str, str]: Dictionary containing version information.
    """
    return {
        "version": get_version(),
        "project": "Roadgraph",
        "description": "Route planning over road intersection graphs",
    }
