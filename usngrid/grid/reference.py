"""Parsed form of a USNG/MGRS grid reference."""

from __future__ import annotations

from dataclasses import dataclass

from usngrid.config import BLOCK_SIZE


@dataclass(frozen=True)
class GridReference:
    """Fields of a grid reference such as ``18S UJ 2348 0648``.

    Attributes:
        zone_number: UTM zone, 1-60.
        band_letter: Latitude band, C-X without I and O.
        column_letter: First square letter (easting), None for a zone-only reference.
        row_letter: Second square letter (northing), None for a zone-only reference.
        easting_digits: Truncated easting within the square, zero padded.
        northing_digits: Truncated northing within the square, same length as the easting.
    """

    zone_number: int
    band_letter: str
    column_letter: str | None = None
    row_letter: str | None = None
    easting_digits: str = ""
    northing_digits: str = ""

    @property
    def precision(self) -> int:
        """Number of digits in each of the easting and northing groups."""
        return len(self.easting_digits)

    @property
    def grid_zone_designation(self) -> str:
        return f"{self.zone_number}{self.band_letter}"

    @property
    def square_id(self) -> str | None:
        """The two square letters, or None for a zone-only reference."""
        if self.column_letter and self.row_letter:
            return self.column_letter + self.row_letter
        return None

    @property
    def cell_size(self) -> int:
        """Side of the square the digits denote, in meters (100,000 with no digits)."""
        return BLOCK_SIZE // 10**self.precision

    def parts(self) -> list[str]:
        parts = [self.grid_zone_designation]
        if self.square_id:
            parts.append(self.square_id)
            if self.precision:
                parts.extend((self.easting_digits, self.northing_digits))
        return parts

    def to_usng_string(self) -> str:
        """Canonical spaced form, e.g. ``"18S UJ 2348 0648"``."""
        return " ".join(self.parts())

    def to_mgrs_string(self) -> str:
        """Unspaced MGRS form, e.g. ``"18SUJ23480648"``."""
        return "".join(self.parts())

    def __str__(self) -> str:
        return self.to_usng_string()
