"""UTM coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from usngrid.config import NORTHING_OFFSET


class Hemisphere(Enum):
    """Hemisphere indicator that replaces a negative northing."""

    N = "N"
    S = "S"


@dataclass(frozen=True)
class UtmCoordinate:
    """A projected position.

    ``northing`` is signed (negative south of the equator) unless
    ``hemisphere`` is set, in which case southern northings carry the
    10,000,000 m false northing.

    Attributes:
        easting: Meters east of the zone's false origin (central meridian + 500,000).
        northing: Meters north of the equator, or of the false origin.
        zone_number: UTM zone in [1, 60].
        band_letter: Latitude band of the projected point, when known.
        hemisphere: Set when the northing is offset-corrected.
    """

    easting: float
    northing: float
    zone_number: int
    band_letter: str | None = None
    hemisphere: Hemisphere | None = None

    def signed_northing(self) -> float:
        """Northing relative to the equator, negative in the south."""
        if self.hemisphere is Hemisphere.S:
            return self.northing - NORTHING_OFFSET
        return self.northing

    def with_hemisphere(self) -> UtmCoordinate:
        """The same position with a non-negative northing and a hemisphere flag."""
        if self.hemisphere is not None:
            return self
        if self.northing < 0:
            return UtmCoordinate(
                self.easting, self.northing + NORTHING_OFFSET, self.zone_number, self.band_letter, Hemisphere.S
            )
        return UtmCoordinate(self.easting, self.northing, self.zone_number, self.band_letter, Hemisphere.N)

    def __str__(self) -> str:
        band = self.band_letter or ""
        hemisphere = f" {self.hemisphere.value}" if self.hemisphere else ""
        return f"{self.zone_number}{band} {self.easting:.3f}mE {self.northing:.3f}mN{hemisphere}"
