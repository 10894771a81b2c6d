"""Float-based units with automatic SI conversion.

UnitFloat stores its value in SI units (radians, meters) while letting
callers construct and display it in the unit's natural scale. The
projection code relies on this: ``float(Degree(38.9))`` is already the
latitude in radians.

Arithmetic is plain float arithmetic on the SI value; only conversion
and equality check that both sides belong to the same unit family.

Example:
    >>> cell = Kilometer(100)
    >>> print(cell)
    100.0 km
    >>> float(cell)
    100000.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Float holding a quantity in SI units.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance directly from a value already in SI units."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Value in the scale of another unit of the same family.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def __eq__(self, other: object) -> bool:
        """Equality on the SI value.

        A bare number is compared against the SI value; comparing with a
        unit of another family raises TypeError.
        """
        if isinstance(other, Unit):
            self._check_same_root(type(other))
        return float.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
