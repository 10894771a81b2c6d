"""Geographic value types used at the edges of the converter.

The converter returns a GeoPoint when a grid reference is decoded to a
single position and a BoundingBox when it is decoded to the cell the
reference denotes. Both are immutable.

Two distances are offered. ``GeoPoint.distance_to`` is the WGS84
geodesic distance computed by pyproj and is the one to use when
measuring how far apart two positions really are.
``great_circle_distance`` is the spherical haversine distance the grid
uses to pick a precision for a bounding box; it must stay spherical so
that the same box always maps to the same precision.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pyproj import Geod

from usngrid.config import EARTH_MEAN_RADIUS
from usngrid.unit import Degree, Meter

# WGS84 geodesic calculator for accurate Earth surface calculations
_WGS84 = Geod(ellps="WGS84")


class Latitude(Degree):
    """Latitude in degrees (-90 to +90), stored in radians.

    Example:
        >>> lat = Latitude(38.8895)
        >>> float(lat)  # radians
        0.678753...
        >>> lat.to(Latitude)  # degrees
        38.8895
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees (-180 to +180), stored in radians."""

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass(frozen=True)
class GeoPoint:
    """A position on the ellipsoid.

    Attributes:
        latitude (Latitude): North/South position.
        longitude (Longitude): East/West position.

    Example:
        >>> monument = GeoPoint.from_deg(38.8895, -77.0353)
        >>> capitol = GeoPoint.from_deg(38.8899, -77.0091)
        >>> monument.distance_to(capitol)  # a little under 2.3 km
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from decimal degrees.

        Args:
            lat (float): Latitude, negative south of the equator.
            lon (float): Longitude, negative west of Greenwich.
        """
        return cls(Latitude(lat), Longitude(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from radians."""
        return cls(Latitude.from_si(lat), Longitude.from_si(lon))

    @property
    def lat(self) -> float:
        """Latitude in decimal degrees."""
        return self.latitude.to(Latitude)

    @property
    def lon(self) -> float:
        """Longitude in decimal degrees."""
        return self.longitude.to(Longitude)

    def distance_to(self, other: GeoPoint) -> Meter:
        """Geodesic distance to another point on the WGS84 ellipsoid.

        Args:
            other (GeoPoint): Target point.

        Returns:
            Meter: Length of the shortest path along the ellipsoid.
        """
        _az12, _az21, dist = _WGS84.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Meter(dist)

    def great_circle_distance_to(self, other: GeoPoint) -> Meter:
        """Haversine distance to another point on a sphere of mean earth radius."""
        return great_circle_distance(self.lat, self.lon, other.lat, other.lon)

    def __str__(self) -> str:
        return f"{self.lat:.6f}, {self.lon:.6f}"


@dataclass(frozen=True)
class BoundingBox:
    """Edges of a grid cell or query box, in decimal degrees.

    Any edge may be None when it could not be resolved, for example when a
    latitude band lookup fails while the zone lookup succeeds.
    """

    north: float | None = None
    south: float | None = None
    east: float | None = None
    west: float | None = None

    @property
    def is_complete(self) -> bool:
        """True when all four edges are known."""
        return None not in (self.north, self.south, self.east, self.west)

    @property
    def center(self) -> GeoPoint | None:
        """Midpoint of the box, or None if an edge is missing."""
        if not self.is_complete:
            return None
        return GeoPoint.from_deg((self.north + self.south) / 2, (self.east + self.west) / 2)

    def contains(self, point: GeoPoint) -> bool:
        """Whether ``point`` lies inside the box, edges included."""
        if not self.is_complete:
            return False
        lat_in_range = min(self.south, self.north) <= point.lat <= max(self.south, self.north)
        lon_in_range = min(self.west, self.east) <= point.lon <= max(self.west, self.east)
        return lat_in_range and lon_in_range

    def diagonal(self) -> Meter:
        """Size of the box used to choose a grid precision.

        This is the larger of the north-south extent and the east-west
        extent, both measured as haversine distances.

        Raises:
            ValueError: If an edge is missing.
        """
        if not self.is_complete:
            raise ValueError(f"Incomplete bounding box: {self}")
        phi1 = math.radians(self.north)
        phi2 = math.radians(self.south)
        delta_phi = math.radians(self.south - self.north)
        delta_lambda = math.radians(self.west - self.east)

        height = math.sin(delta_phi / 2) ** 2
        height = EARTH_MEAN_RADIUS * 2 * math.atan2(math.sqrt(height), math.sqrt(1 - height))
        length = math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
        length = EARTH_MEAN_RADIUS * 2 * math.atan2(math.sqrt(length), math.sqrt(1 - length))
        return Meter(max(height, length))


def great_circle_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> Meter:
    """Haversine distance between two points given in decimal degrees.

    Example:
        >>> round(float(great_circle_distance(0, 0, 0, 1)))
        111195
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)
    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return Meter(EARTH_MEAN_RADIUS * c)
