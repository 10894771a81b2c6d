"""Datum configuration and grid constants.

This module is the single place where the numbers that define the grid
live: the UTM scale factor and false origins, the size of a 100 km grid
square, the periods of the square-letter tables, and the two ellipsoids
a converter can be bound to.

A converter picks its ellipsoid once, from a Datum, and keeps it for its
whole lifetime:

    >>> from usngrid.config import Datum, ellipsoid_for
    >>> ellipsoid_for(Datum.NAD27).equatorial_radius
    6378206.4
    >>> Datum.parse("wgs84") is Datum.NAD83
    True
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import Enum

# Scale factor along the central meridian
K0 = 0.9996

# UTM false origins (meters)
EASTING_OFFSET = 500000.0
NORTHING_OFFSET = 10000000.0

# Size of a square identifier within a grid zone designation (meters)
BLOCK_SIZE = 100000

# Square letters repeat every 8 columns and every 20 rows
GRIDSQUARE_SET_COL_SIZE = 8
GRIDSQUARE_SET_ROW_SIZE = 20

# Northing letters cycle every 2,000,000 m (20 rows of 100 km)
NORTHING_CYCLE = GRIDSQUARE_SET_ROW_SIZE * BLOCK_SIZE

# Coverage of the grid, in degrees of latitude
MIN_GRID_LATITUDE = -80.0
MAX_GRID_LATITUDE = 84.0

# Mean earth radius for great-circle distances (meters)
EARTH_MEAN_RADIUS = 6371000.0

# Environment variable read by the command line tool for its default datum
DATUM_ENV_VAR = "USNGRID_DATUM"


@dataclass(frozen=True)
class Ellipsoid:
    """Shape parameters of a reference ellipsoid.

    Attributes:
        name: Human readable name of the ellipsoid.
        equatorial_radius: Semi-major axis in meters.
        eccentricity_squared: First eccentricity squared.
    """

    name: str
    equatorial_radius: float
    eccentricity_squared: float

    @property
    def eccentricity_prime_squared(self) -> float:
        """Second eccentricity squared, e'^2 = e^2 / (1 - e^2)."""
        return self.eccentricity_squared / (1 - self.eccentricity_squared)

    @property
    def e1(self) -> float:
        """Auxiliary term of the footprint-latitude series."""
        root = math.sqrt(1 - self.eccentricity_squared)
        return (1 - root) / (1 + root)


WGS84 = Ellipsoid("WGS84", 6378137.0, 0.006694380023)
CLARKE_1866 = Ellipsoid("Clarke 1866", 6378206.4, 0.006768658)


class Datum(Enum):
    """Datums a converter can be configured with.

    NAD83 and WGS84 share an ellipsoid to well within grid precision and
    are treated as the same datum.
    """

    NAD83 = "NAD83"
    NAD27 = "NAD27"

    @classmethod
    def parse(cls, value: Datum | str | None) -> Datum:
        """Resolve a datum name, case-insensitively.

        Anything other than ``NAD27`` selects NAD83, including None, so
        that an unconfigured converter behaves like a default one.

        Args:
            value: A Datum, a datum name, or None.

        Returns:
            Datum: The selected datum.
        """
        if isinstance(value, Datum):
            return value
        if value is not None and value.strip().upper() == cls.NAD27.value:
            return cls.NAD27
        return cls.NAD83

    @classmethod
    def from_env(cls) -> Datum:
        """Datum named by the USNGRID_DATUM environment variable, NAD83 if unset."""
        return cls.parse(os.environ.get(DATUM_ENV_VAR))


_ELLIPSOIDS = {
    Datum.NAD83: WGS84,
    Datum.NAD27: CLARKE_1866,
}


def ellipsoid_for(datum: Datum | str | None) -> Ellipsoid:
    """Ellipsoid parameters for a datum."""
    return _ELLIPSOIDS[Datum.parse(datum)]
