"""Converter facade binding every conversion to one datum.

A Converter picks its ellipsoid once, at construction, and routes each
call through the zone resolver, the projection and the grid encoder or
decoder. It holds no other state.

Example:
    >>> converter = Converter()
    >>> converter.encode(38.8895, -77.0353, 5)
    '18S UJ 2347 0648'
    >>> converter.encode_mgrs(38.8895, -77.0353, 5)
    '18SUJ23470648'
    >>> cell = converter.decode("18S UJ 2347 0648")
    >>> point = converter.decode("18S UJ 2347 0648", center=True)
    >>>
    >>> nad27 = Converter("nad27")
    >>> nad27.datum
    <Datum.NAD27: 'NAD27'>
"""

from __future__ import annotations

import logging

from usngrid.config import Datum, Ellipsoid, ellipsoid_for
from usngrid.geo import BoundingBox, GeoPoint, great_circle_distance
from usngrid.grid import (
    GridDecoder,
    GridEncoder,
    ParseResult,
    UsngCoordinate,
    encode_nad27,
    parse_grid_reference,
)
from usngrid.projection import Hemisphere, TransverseMercator, UtmCoordinate
from usngrid.unit import Meter
from usngrid.zones import band_letter, resolve_zone_number

logger = logging.getLogger(__name__)


class Converter:
    """Conversions between latitude/longitude, UTM and USNG/MGRS on one datum.

    Args:
        datum: ``Datum.NAD83`` (the default, same as WGS84) or
            ``Datum.NAD27``, or a case-insensitive datum name. Unknown
            names select NAD83.
    """

    def __init__(self, datum: Datum | str | None = Datum.NAD83):
        self._datum = Datum.parse(datum)
        self._projection = TransverseMercator(ellipsoid_for(self._datum))
        self._encoder = GridEncoder(self._projection)
        self._decoder = GridDecoder(self._projection)
        logger.debug("Converter bound to %s (%s)", self._datum.value, self.ellipsoid.name)

    @property
    def datum(self) -> Datum:
        return self._datum

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._projection.ellipsoid

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._datum.value})"

    # ------------------------------------------------------------------ zones
    def resolve_zone_number(self, lat: float, lon: float) -> int:
        return resolve_zone_number(lat, lon)

    def band_letter(self, lat: float) -> str:
        return band_letter(lat)

    # ------------------------------------------------------------- projection
    def project(self, lat: float, lon: float, zone: int | None = None) -> UtmCoordinate | None:
        """Latitude/longitude to UTM with a signed northing; None outside the grid."""
        return self._projection.project(lat, lon, zone)

    def project_with_hemisphere(self, lat: float, lon: float, zone: int | None = None) -> UtmCoordinate | None:
        """Latitude/longitude to UTM with a false northing and hemisphere flag."""
        return self._projection.project_with_hemisphere(lat, lon, zone)

    def unproject(
        self, northing: float, easting: float, zone_number: int, accuracy: float | Meter | None = None
    ) -> GeoPoint | BoundingBox:
        return self._projection.unproject(northing, easting, zone_number, accuracy)

    def unproject_with_hemisphere(
        self,
        northing: float,
        easting: float,
        zone_number: int,
        accuracy: float | Meter | None = None,
        hemisphere: Hemisphere | str | None = None,
    ) -> GeoPoint | BoundingBox:
        return self._projection.unproject_with_hemisphere(northing, easting, zone_number, accuracy, hemisphere)

    # --------------------------------------------------------------- encoding
    def encode(self, lat: float, lon: float, precision: int | None = 0) -> str:
        """USNG string of a position; see ``usngrid.grid.encoder`` for precision levels."""
        return self._encoder.encode(lat, lon, precision)

    def encode_mgrs(self, lat: float, lon: float, precision: int | None = 0) -> str:
        return self._encoder.encode_mgrs(lat, lon, precision)

    def encode_bounding_box(self, north: float, south: float, east: float, west: float) -> str:
        """USNG string of a box's center at the precision its size suggests."""
        return self._encoder.encode_bounding_box(north, south, east, west)

    def encode_nad27(self, lat: float, lon: float, precision: int | None = 0) -> str:
        """USNG string on the NAD27 ellipsoid whatever this converter's datum,
        tagged ``" (NAD27)"``."""
        return encode_nad27(lat, lon, precision)

    # --------------------------------------------------------------- decoding
    def decode(self, text: str | None, center: bool = False) -> GeoPoint | BoundingBox | None:
        """Grid reference text to its cell, or the cell's center; None if malformed."""
        return self._decoder.decode(text, center)

    def decode_to_utm(self, text: str | None) -> UtmCoordinate | None:
        return self._decoder.decode_to_utm(text)

    def parse(self, text: str | None) -> ParseResult:
        """Parse grid reference text without decoding it."""
        return parse_grid_reference(text)

    def parse_usng(self, text: str) -> UsngCoordinate:
        return UsngCoordinate.parse_usng(text)

    def parse_mgrs(self, text: str) -> UsngCoordinate:
        return UsngCoordinate.parse_mgrs(text)

    # ---------------------------------------------------------------- metrics
    def great_circle_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> Meter:
        """Haversine distance between two positions on a sphere of mean earth radius."""
        return great_circle_distance(lat1, lon1, lat2, lon2)
