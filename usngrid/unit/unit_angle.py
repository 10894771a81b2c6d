"""Angular units.

Angles are held in radians so the projection series can pass them to
``math.sin`` and ``math.tan`` as they are; positions are entered and
printed in decimal degrees.

    >>> float(Degree(180)) == pi
    True
    >>> Radian(pi / 2).to(Degree)
    90.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angle in radians; root of the angle family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angle in decimal degrees, stored as radians."""

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
