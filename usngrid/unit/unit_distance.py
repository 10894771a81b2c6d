"""Distance units for grid cell sizes and ground distances.

Grid references quote their resolution in meters, from 1 m cells up to
the 100 km square, while bounding-box diagonals are compared against
kilometer thresholds. Both are held in meters.

    >>> float(Kilometer(100))
    100000.0
    >>> Meter(10).to(Kilometer)
    0.01
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance in meters; root of the distance family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
