"""Forward and inverse Universal Transverse Mercator projection.

Equations from USGS Bulletin 1532 (USGS Professional Paper 1395, "Map
Projections - A Working Manual", John P. Snyder, 1987). Both directions
use the closed-form series truncated at sixth-order terms; there is no
iteration, so results match other implementations of the same formulas
to the millimeter.

East longitudes and north latitudes are positive; all angles are
decimal degrees at the interface.
"""

from __future__ import annotations

import logging
import math

from usngrid.config import (
    BLOCK_SIZE,
    EASTING_OFFSET,
    K0,
    MAX_GRID_LATITUDE,
    MIN_GRID_LATITUDE,
    NORTHING_OFFSET,
    WGS84,
    Ellipsoid,
)
from usngrid.errors import InputRangeError
from usngrid.geo import BoundingBox, GeoPoint
from usngrid.unit import Degree, Meter, Radian
from usngrid.zones import band_latitudes, band_letter, normalize_longitude, resolve_zone_number, zone_longitudes

from .utm import Hemisphere, UtmCoordinate

logger = logging.getLogger(__name__)

# Latitude reported instead of exactly 0 so the band lookup lands in N
EQUATOR_LATITUDE = 0.001


def central_meridian(zone_number: int) -> float:
    """Longitude of a zone's central meridian in degrees."""
    return (int(zone_number) - 1) * 6 - 180 + 3


class TransverseMercator:
    """UTM projection bound to one ellipsoid.

    Instances hold no state besides the ellipsoid and can be shared
    between threads.

    Example:
        >>> tm = TransverseMercator()
        >>> utm = tm.project(38.8895, -77.0353)
        >>> utm.zone_number, round(utm.easting), round(utm.northing)
        (18, 323478, 4306483)
        >>> point = tm.unproject(utm.northing, utm.easting, utm.zone_number)
    """

    def __init__(self, ellipsoid: Ellipsoid = WGS84):
        self._ellipsoid = ellipsoid

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def project(self, lat: float, lon: float, zone: int | None = None) -> UtmCoordinate | None:
        """Project a geographic position to UTM.

        The northing is negative in the southern hemisphere; see
        ``project_with_hemisphere`` for the offset form.

        Args:
            lat: Latitude in degrees.
            lon: Longitude in degrees, within [-180, 360].
            zone: Zone to project into instead of the position's own zone.

        Returns:
            UtmCoordinate | None: The projected position, or None when the
            latitude lies outside the grid's [-80, 84] coverage.

        Raises:
            InputRangeError: If the latitude or longitude is out of range.
        """
        lat = float(lat)
        lon = float(lon)

        if lat > MAX_GRID_LATITUDE or lat < MIN_GRID_LATITUDE:
            logger.debug("Latitude %s is outside grid coverage, no projection", lat)
            return None

        if lon > 360 or lon < -180 or lat > 90 or lat < -90:
            raise InputRangeError("project", lat, lon)

        ecc_squared = self._ellipsoid.eccentricity_squared
        ecc_prime_squared = self._ellipsoid.eccentricity_prime_squared
        radius = self._ellipsoid.equatorial_radius

        lat_rad = float(Degree(lat))
        lon_rad = float(Degree(normalize_longitude(lon)))

        zone_number = zone if zone else resolve_zone_number(lat, lon)
        lon_origin_rad = float(Degree(central_meridian(zone_number)))

        sin_lat = math.sin(lat_rad)
        cos_lat = math.cos(lat_rad)
        tan_lat = math.tan(lat_rad)

        N = radius / math.sqrt(1 - ecc_squared * sin_lat * sin_lat)
        T = tan_lat * tan_lat
        C = ecc_prime_squared * cos_lat * cos_lat
        A = cos_lat * (lon_rad - lon_origin_rad)

        # Mo drops out of M: the origin latitude of UTM is the equator
        e2 = ecc_squared
        e4 = e2 * e2
        e6 = e4 * e2
        M = radius * (
            (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * lat_rad
            - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * lat_rad)
            + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * lat_rad)
            - (35 * e6 / 3072) * math.sin(6 * lat_rad)
        )

        easting = (
            K0
            * N
            * (
                A
                + (1 - T + C) * A**3 / 6
                + (5 - 18 * T + T * T + 72 * C - 58 * ecc_prime_squared) * A**5 / 120
            )
            + EASTING_OFFSET
        )
        northing = K0 * (
            M
            + N
            * tan_lat
            * (
                A * A / 2
                + (5 - T + 9 * C + 4 * C * C) * A**4 / 24
                + (61 - 58 * T + T * T + 600 * C - 330 * ecc_prime_squared) * A**6 / 720
            )
        )

        return UtmCoordinate(easting, northing, zone_number, band_letter(lat))

    def project_with_hemisphere(self, lat: float, lon: float, zone: int | None = None) -> UtmCoordinate | None:
        """Project like ``project`` but report southern northings with the
        10,000,000 m false northing and an ``S`` hemisphere flag."""
        utm = self.project(lat, lon, zone)
        return utm.with_hemisphere() if utm is not None else None

    def unproject(
        self,
        northing: float,
        easting: float,
        zone_number: int,
        accuracy: float | Meter | None = None,
    ) -> GeoPoint | BoundingBox:
        """Convert UTM coordinates back to latitude and longitude.

        Args:
            northing: Meters from the equator, negative in the south.
            easting: Meters including the 500,000 m false easting.
            zone_number: UTM zone of the coordinates.
            accuracy: Size of the cell the coordinates denote, in meters.
                When given, the cell's bounding box is returned instead of
                a point. Cells larger than 100 km are answered from the
                band and zone tables rather than by projection.

        Returns:
            GeoPoint | BoundingBox: The position, or the cell it names.
        """
        accuracy = float(accuracy) if accuracy else None
        radius = self._ellipsoid.equatorial_radius
        ecc_squared = self._ellipsoid.eccentricity_squared
        ecc_prime_squared = self._ellipsoid.eccentricity_prime_squared
        e1 = self._ellipsoid.e1

        x_utm = float(easting) - EASTING_OFFSET
        y_utm = float(northing)
        zone_number = int(zone_number)
        lon_origin = central_meridian(zone_number)

        # M is the true distance along the central meridian from the equator
        M = y_utm / K0
        mu = M / (radius * (1 - ecc_squared / 4 - 3 * ecc_squared**2 / 64 - 5 * ecc_squared**3 / 256))

        # Footprint latitude: the latitude on the central meridian with the same y
        phi1_rad = (
            mu
            + (3 * e1 / 2 - 27 * e1**3 / 32) * math.sin(2 * mu)
            + (21 * e1**2 / 16 - 55 * e1**4 / 32) * math.sin(4 * mu)
            + (151 * e1**3 / 96) * math.sin(6 * mu)
        )

        sin_phi1 = math.sin(phi1_rad)
        cos_phi1 = math.cos(phi1_rad)
        tan_phi1 = math.tan(phi1_rad)

        N1 = radius / math.sqrt(1 - ecc_squared * sin_phi1 * sin_phi1)
        T1 = tan_phi1 * tan_phi1
        C1 = ecc_prime_squared * cos_phi1 * cos_phi1
        R1 = radius * (1 - ecc_squared) / math.pow(1 - ecc_squared * sin_phi1 * sin_phi1, 1.5)
        D = x_utm / (N1 * K0)

        lat_rad = phi1_rad - (N1 * tan_phi1 / R1) * (
            D * D / 2
            - (5 + 3 * T1 + 10 * C1 - 4 * C1 * C1 - 9 * ecc_prime_squared) * D**4 / 24
            + (61 + 90 * T1 + 298 * C1 + 45 * T1 * T1 - 252 * ecc_prime_squared - 3 * C1 * C1) * D**6 / 720
        )
        lat = Radian(lat_rad).to(Degree)
        if lat == 0:
            lat = EQUATOR_LATITUDE

        lon_rad = (
            D
            - (1 + 2 * T1 + C1) * D**3 / 6
            + (5 - 2 * C1 + 28 * T1 - 3 * C1 * C1 + 8 * ecc_prime_squared + 24 * T1 * T1) * D**5 / 120
        ) / cos_phi1
        lon = lon_origin + Radian(lon_rad).to(Degree)

        if not accuracy:
            return GeoPoint.from_deg(lat, lon)

        if accuracy <= BLOCK_SIZE:
            north_east = self.unproject(y_utm + accuracy, float(easting) + accuracy, zone_number)
            return BoundingBox(north=north_east.lat, south=lat, east=north_east.lon, west=lon)

        # The series loses accuracy over a whole zone; fall back to the tables
        lats = band_latitudes(band_letter(lat))
        west, east = zone_longitudes(zone_number)
        if lats is None:
            logger.debug("No band for latitude %s, returning longitudes only", lat)
            return BoundingBox(east=east, west=west)
        south, north = lats
        return BoundingBox(north=north, south=south, east=east, west=west)

    def unproject_with_hemisphere(
        self,
        northing: float,
        easting: float,
        zone_number: int,
        accuracy: float | Meter | None = None,
        hemisphere: Hemisphere | str | None = None,
    ) -> GeoPoint | BoundingBox:
        """Unproject a northing that uses a hemisphere flag instead of a sign."""
        if hemisphere is not None and Hemisphere(hemisphere) is Hemisphere.S:
            northing = float(northing) - NORTHING_OFFSET
        return self.unproject(northing, easting, zone_number, accuracy)

    def unproject_utm(self, utm: UtmCoordinate, accuracy: float | Meter | None = None) -> GeoPoint | BoundingBox:
        """Unproject a UtmCoordinate, honouring its hemisphere flag."""
        return self.unproject(utm.signed_northing(), utm.easting, utm.zone_number, accuracy)
