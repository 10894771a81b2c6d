"""Conversions between latitude/longitude, UTM and USNG/MGRS grid references.

The United States National Grid (USNG) and the Military Grid Reference
System (MGRS) name positions by grid zone, 100 km square and a truncated
easting/northing inside the square, e.g. ``18S UJ 2347 0648``. USNG
separates the parts with spaces; MGRS runs them together.

Framework Components:
    Conversion (usngrid.converter):
        • Converter: Facade binding every conversion to one datum
    Grid references (usngrid.grid):
        • GridEncoder / GridDecoder: Strings from and to positions
        • parse_grid_reference: Tolerant parser returning a tagged result
        • UsngCoordinate: Strictly validated reference value
    Projection (usngrid.projection):
        • TransverseMercator: Forward and inverse UTM series
        • UtmCoordinate: Zone, easting and northing
    Zones (usngrid.zones):
        • Zone numbers with the Norway and Svalbard exceptions, band letters
    Geography and units (usngrid.geo, usngrid.unit):
        • GeoPoint, BoundingBox, Degree, Meter and friends
    Configuration (usngrid.config):
        • Datum and Ellipsoid presets, grid constants

Usage:
    >>> from usngrid import Converter
    >>> converter = Converter()
    >>> converter.encode(38.8895, -77.0353, 5)
    '18S UJ 2347 0648'
    >>> converter.decode("18S UJ 2347 0648", center=True)
"""

from usngrid.config import CLARKE_1866, WGS84, Datum, Ellipsoid
from usngrid.converter import Converter
from usngrid.errors import GridReferenceParseError, InputRangeError, UsngError
from usngrid.geo import BoundingBox, GeoPoint
from usngrid.grid import (
    CoordinatePrecision,
    GridDecoder,
    GridEncoder,
    GridReference,
    ParseFailure,
    ParseResult,
    UsngCoordinate,
    encode_nad27,
    parse_grid_reference,
)
from usngrid.projection import Hemisphere, TransverseMercator, UtmCoordinate
from usngrid.zones import band_letter, resolve_zone, resolve_zone_number

__version__ = "0.1.0"

__all__ = [
    "Converter",
    "Datum",
    "Ellipsoid",
    "WGS84",
    "CLARKE_1866",
    "UsngError",
    "InputRangeError",
    "GridReferenceParseError",
    "GeoPoint",
    "BoundingBox",
    "GridEncoder",
    "GridDecoder",
    "GridReference",
    "ParseFailure",
    "ParseResult",
    "parse_grid_reference",
    "UsngCoordinate",
    "CoordinatePrecision",
    "encode_nad27",
    "TransverseMercator",
    "UtmCoordinate",
    "Hemisphere",
    "resolve_zone_number",
    "band_letter",
    "resolve_zone",
]
