"""
Geographic point primitive used as vertex identity and distance metric.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from shapely.geometry import Point as ShapelyPoint

from roadgraph.core.config import settings


@dataclass(frozen=True)
class GeographicPoint:
    """
    Immutable (latitude, longitude) location in decimal degrees.

    Points compare and hash by coordinate value, so two points built from
    the same coordinates identify the same road graph vertex.

    Attributes:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
    """

    latitude: float
    longitude: float

    def distance(self, other: "GeographicPoint") -> float:
        """
        Great-circle distance to another point using the haversine formula.

        Args:
            other: Point to measure to

        Returns:
            Distance in kilometres (always >= 0)
        """
        lat1, lon1, lat2, lon2 = np.radians(
            [self.latitude, self.longitude, other.latitude, other.longitude]
        )
        dlat = lat2 - lat1
        dlon = lon2 - lon1

        a = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
        c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))

        return float(settings.earth_radius_km * c)

    def as_lon_lat(self) -> Tuple[float, float]:
        """Get coordinates in (x, y) = (longitude, latitude) order."""
        return (self.longitude, self.latitude)

    def to_shapely(self) -> ShapelyPoint:
        """Convert to a Shapely point in lon/lat order."""
        return ShapelyPoint(self.as_lon_lat())

    def __str__(self) -> str:
        return f"Lat: {self.latitude}, Lon: {self.longitude}"
