"""Latitude/longitude to USNG and MGRS strings.

Precision levels select how much of the reference is produced:

    0  zone and band only                 "18S"
    1  100 km square                      "18S UJ"
    2  10 km   (one digit each)           "18S UJ 2 0"
    3  1 km    (two digits each)          "18S UJ 23 06"
    4  100 m   (three digits each)        "18S UJ 234 064"
    5  10 m    (four digits each)         "18S UJ 2347 0648"
    6  1 m     (five digits each)         "18S UJ 23478 06483"

Digits are truncated, never rounded: a reference names the square the
point lies in, and the point is somewhere inside it.
"""

from __future__ import annotations

import logging
import math

from usngrid.config import BLOCK_SIZE, NORTHING_OFFSET, CLARKE_1866
from usngrid.errors import InputRangeError
from usngrid.geo import BoundingBox
from usngrid.projection import TransverseMercator
from usngrid.unit import Kilometer, Meter
from usngrid.zones import band_letter, resolve_zone_number

from .reference import GridReference
from .tables import square_letters

logger = logging.getLogger(__name__)

MAX_DIGITS = 5
MAX_PRECISION = MAX_DIGITS + 1

NAD27_SUFFIX = " (NAD27)"

# Smallest box diagonal for each precision level, coarsest first
_DIAGONAL_THRESHOLDS = (
    (Kilometer(100), 0),
    (Kilometer(10), 1),
    (Kilometer(1), 2),
    (Meter(100), 3),
    (Meter(10), 4),
    (Meter(1), 5),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def digits_for_precision(precision: int | None) -> int:
    """Number of easting/northing digits produced at a precision level."""
    if precision is None or precision < 0:
        return 0
    return min(max(int(precision) - 1, 0), MAX_DIGITS)


def precision_for_diagonal(diagonal: float | Meter) -> int:
    """Precision level whose cells best match a box of the given diagonal.

    Example:
        >>> precision_for_diagonal(Kilometer(5))
        2
        >>> precision_for_diagonal(Meter(0.5))
        6
    """
    for threshold, precision in _DIAGONAL_THRESHOLDS:
        if float(diagonal) > float(threshold):
            return precision
    return MAX_PRECISION


class GridEncoder:
    """Builds grid references from geographic positions."""

    def __init__(self, projection: TransverseMercator | None = None):
        self._projection = projection or TransverseMercator()

    @property
    def projection(self) -> TransverseMercator:
        return self._projection

    def reference(self, lat: float, lon: float, precision: int | None = 0) -> GridReference:
        """Grid reference of a position at a precision level.

        Args:
            lat: Latitude in degrees, within [-80, 84].
            lon: Longitude in degrees; values beyond ±180 are wrapped once.
            precision: Precision level 0-6, see the module documentation.
                None and negative values mean 0; values above 6 mean 6.

        Raises:
            InputRangeError: If the position is outside the grid.
        """
        lon = float(lon)
        if lon < -180:
            lon += 360
        elif lon > 180:
            lon -= 360
        lat = float(lat)

        utm = self._projection.project(lat, lon)
        if utm is None:
            raise InputRangeError("encode", lat, lon)

        northing = utm.northing + NORTHING_OFFSET if lat < 0 else utm.northing
        zone_number = resolve_zone_number(lat, lon)
        band = band_letter(lat)

        if precision is None or precision < 1:
            return GridReference(zone_number, band)

        metric_northing = round_half_up(northing)
        metric_easting = round_half_up(utm.easting)
        letters = square_letters(zone_number, metric_northing, metric_easting)

        digits = digits_for_precision(precision)
        if digits < 1:
            return GridReference(zone_number, band, letters[0], letters[1])

        divisor = 10 ** (MAX_DIGITS - digits)
        usng_easting = (metric_easting % BLOCK_SIZE) // divisor
        usng_northing = (metric_northing % BLOCK_SIZE) // divisor
        return GridReference(
            zone_number,
            band,
            letters[0],
            letters[1],
            str(usng_easting).zfill(digits),
            str(usng_northing).zfill(digits),
        )

    def encode(self, lat: float, lon: float, precision: int | None = 0) -> str:
        """USNG string of a position, e.g. ``"18S UJ 2347 0648"``."""
        return self.reference(lat, lon, precision).to_usng_string()

    def encode_mgrs(self, lat: float, lon: float, precision: int | None = 0) -> str:
        """MGRS string of a position: the USNG string without spaces."""
        return self.reference(lat, lon, precision).to_mgrs_string()

    def encode_bounding_box(self, north: float, south: float, east: float, west: float) -> str:
        """USNG string of a box's center, at the precision matching its size.

        This is a rough fit: the reference names the cell containing the
        box center, with cells about as large as the box diagonal.
        """
        north, south, east, west = float(north), float(south), float(east), float(west)
        lat = (north + south) / 2
        lon = (east + west) / 2

        # keep the center off the poles and the antimeridian
        lat = 89.9 if lat >= 90 else -89.9 if lat <= -90 else lat
        lon = 179.9 if lon >= 180 else -179.9 if lon <= -180 else lon

        diagonal = BoundingBox(north=north, south=south, east=east, west=west).diagonal()

        # a box straddling the antimeridian averages to 0
        if lon == 0 and (east > 90 or east < -90) and (west > 90 or west < -90):
            lon = 180

        precision = precision_for_diagonal(diagonal)
        logger.debug("Box diagonal %s maps to precision %d", diagonal, precision)
        return self.encode(lat, lon, precision)


def encode_nad27(lat: float, lon: float, precision: int | None = 0) -> str:
    """USNG string on the NAD27 (Clarke 1866) ellipsoid, tagged ``" (NAD27)"``."""
    encoder = GridEncoder(TransverseMercator(CLARKE_1866))
    return encoder.encode(lat, lon, precision) + NAD27_SUFFIX
