"""Universal Transverse Mercator projection.

Exports:
    TransverseMercator: Forward/inverse projection bound to an ellipsoid
    UtmCoordinate: Projected position (zone, easting, northing)
    Hemisphere: N/S flag for offset-corrected northings
    central_meridian: Central meridian of a zone in degrees
"""

from .transverse_mercator import EQUATOR_LATITUDE, TransverseMercator, central_meridian
from .utm import Hemisphere, UtmCoordinate

__all__ = ["TransverseMercator", "UtmCoordinate", "Hemisphere", "central_meridian", "EQUATOR_LATITUDE"]
