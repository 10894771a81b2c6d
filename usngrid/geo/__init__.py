"""Geographic coordinate types.

Components:
    GeoPoint: Immutable latitude/longitude position
    BoundingBox: North/south/east/west edges of a grid cell or query box
    Latitude: Type-safe latitude in degrees (-90° to +90°)
    Longitude: Type-safe longitude in degrees (-180° to +180°)
    great_circle_distance: Haversine distance between two positions

Typical Usage:
    >>> from usngrid.geo import GeoPoint
    >>> monument = GeoPoint.from_deg(38.8895, -77.0353)
    >>> monument.lat, monument.lon
    (38.8895, -77.0353)
"""

from .geo_point import BoundingBox, GeoPoint, Latitude, Longitude, great_circle_distance

__all__ = ["BoundingBox", "GeoPoint", "Latitude", "Longitude", "great_circle_distance"]
