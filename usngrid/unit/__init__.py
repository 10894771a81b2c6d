"""Type-safe unit system for angles and distances.

Units store their value in SI units and remember the scale they were
created in. The projection works in radians and meters; callers work in
degrees, meters and kilometers.

Unit Families:
    - Angle Family: Radian (root), Degree
    - Distance Family: Meter (root), Kilometer

Example:
    >>> from usngrid.unit import Degree, Kilometer, Meter
    >>>
    >>> lat = Degree(38.8895)
    >>> float(lat)  # radians, ready for math.sin
    0.678753...
    >>> cell = Meter(10)
    >>> cell.to(Kilometer)
    0.01
    >>> # Converting across families is rejected
    >>> # cell.to(Degree)  -> TypeError
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Length",
]
