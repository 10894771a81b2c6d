"""Base unit class for the quantities handled by the grid converter.

Every quantity that crosses a public boundary of the converter (an angle
fed to the projection, a cell size handed to the inverse projection, the
diagonal of a bounding box) belongs to a unit family. Units in the same
family combine freely; units from different families refuse to mix.

A family is named by the class that sets ``IS_FAMILY_ROOT``; every
subclass records that class as its ``ROOT``:

    >>> Kilometer.ROOT is Meter
    True
    >>> Degree.ROOT is Radian
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units inherit from UnitFloat rather than from this class.

    Attributes:
        ROOT: First class of the family, e.g. Meter for Kilometer.
        SYMBOL: Suffix used when printing a value.
        IS_FAMILY_ROOT: Set on the class that starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        roots = [klass for klass in cls.__mro__ if klass.__dict__.get("IS_FAMILY_ROOT")]
        cls.ROOT = roots[0] if roots else cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Raise TypeError unless ``unit_type`` is a unit of the same family."""
        if getattr(unit_type, "ROOT", None) is not cls.ROOT:
            raise TypeError(f"Incompatible units: {cls.ROOT.__name__} and {unit_type.__name__}")
