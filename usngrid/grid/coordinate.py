"""Strictly validated USNG/MGRS coordinate values.

Unlike ``parse_grid_reference``, which reports failures as values,
``UsngCoordinate.parse_usng`` and ``UsngCoordinate.parse_mgrs`` raise
GridReferenceParseError for anything that is not a well formed
reference. USNG text separates the digit groups, MGRS text may run them
together; either may omit the digits or the square letters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from usngrid.errors import GridReferenceParseError

from .reference import GridReference

_BAND = "CDEFGHJKLMNPQRSTUVWX"
_COLUMN = "ABCDEFGHJKLMNPQRSTUVWXYZ"
_ROW = "ABCDEFGHJKLMNPQRSTUV"

USNG_PATTERN = re.compile(rf"(\d\d?)([{_BAND}])\W?([{_COLUMN}][{_ROW}])?(\W\d{{0,5}})?(\W\d{{0,5}})?")
MGRS_PATTERN = re.compile(rf"(\d\d?)([{_BAND}])\W?([{_COLUMN}][{_ROW}])?((?:\W*\d)*)\W*")


class CoordinatePrecision(Enum):
    """Size of the area a coordinate denotes.

    Each member is ``(digits, meters)``: the number of easting/northing
    digits and the side of the square they name. A bare grid zone
    designation names a 6° by 8° zone and carries no square.
    """

    SIX_BY_EIGHT_DEGREES = (None, None)
    ONE_HUNDRED_KILOMETERS = (0, 100000)
    TEN_KILOMETERS = (1, 10000)
    ONE_KILOMETER = (2, 1000)
    ONE_HUNDRED_METERS = (3, 100)
    TEN_METERS = (4, 10)
    ONE_METER = (5, 1)

    @property
    def digits(self) -> int | None:
        return self.value[0]

    @property
    def meters(self) -> int | None:
        return self.value[1]

    @classmethod
    def for_digits(cls, digits: int) -> CoordinatePrecision:
        """Precision of a square reference with ``digits`` digits per group.

        Raises:
            ValueError: If ``digits`` is not between 0 and 5.
        """
        for member in cls:
            if member.digits == digits:
                return member
        raise ValueError(f"No precision with {digits} digits")

    def format(self, value: int) -> str:
        """Zero pad an easting or northing to this precision's digit count."""
        return str(value).zfill(self.digits or 0)


@dataclass(frozen=True)
class UsngCoordinate:
    """A validated grid reference with numeric easting and northing.

    Attributes:
        zone_number: UTM zone, 1-60.
        band_letter: Latitude band letter.
        column_letter: Square column letter, None for a zone designation.
        row_letter: Square row letter, None for a zone designation.
        easting: Easting within the square in units of the precision, or None.
        northing: Northing within the square in units of the precision, or None.
        precision: Area the coordinate denotes.
    """

    zone_number: int
    band_letter: str
    column_letter: str | None = None
    row_letter: str | None = None
    easting: int | None = None
    northing: int | None = None
    precision: CoordinatePrecision = CoordinatePrecision.SIX_BY_EIGHT_DEGREES

    @classmethod
    def parse_usng(cls, text: str) -> UsngCoordinate:
        """Parse USNG text such as ``"18S UJ 2348 0648"``.

        Raises:
            GridReferenceParseError: If the text is not USNG.
        """
        match = USNG_PATTERN.fullmatch(text.upper()) if text else None
        if match is None:
            raise GridReferenceParseError(text, "USNG")
        zone, band, square, east, north = match.groups()
        east = east[1:] if east else ""
        north = north[1:] if north else ""
        if bool(east) != bool(north) or len(east) != len(north) or (east and not square):
            raise GridReferenceParseError(text, "USNG")
        return cls._build(text, "USNG", zone, band, square, east, north)

    @classmethod
    def parse_mgrs(cls, text: str) -> UsngCoordinate:
        """Parse MGRS text such as ``"18SUJ23480648"``.

        The digits are split into equal easting and northing halves.

        Raises:
            GridReferenceParseError: If the text is not MGRS.
        """
        match = MGRS_PATTERN.fullmatch(text.upper()) if text else None
        if match is None:
            raise GridReferenceParseError(text, "MGRS")
        zone, band, square, digits = match.groups()
        digits = re.sub(r"\D", "", digits)
        if len(digits) % 2 or len(digits) > 10 or (digits and not square):
            raise GridReferenceParseError(text, "MGRS")
        half = len(digits) // 2
        return cls._build(text, "MGRS", zone, band, square, digits[:half], digits[half:])

    @classmethod
    def _build(
        cls, text: str, notation: str, zone: str, band: str, square: str | None, east: str, north: str
    ) -> UsngCoordinate:
        zone_number = int(zone)
        if not 1 <= zone_number <= 60:
            raise GridReferenceParseError(text, notation)
        if not square:
            return cls(zone_number, band)
        if not east:
            return cls(zone_number, band, square[0], square[1], precision=CoordinatePrecision.ONE_HUNDRED_KILOMETERS)
        return cls(
            zone_number,
            band,
            square[0],
            square[1],
            int(east),
            int(north),
            CoordinatePrecision.for_digits(len(east)),
        )

    @classmethod
    def from_reference(cls, reference: GridReference) -> UsngCoordinate:
        """Typed view of a tolerant-parser or encoder result."""
        if reference.square_id is None:
            return cls(reference.zone_number, reference.band_letter)
        if not reference.precision:
            return cls(
                reference.zone_number,
                reference.band_letter,
                reference.column_letter,
                reference.row_letter,
                precision=CoordinatePrecision.ONE_HUNDRED_KILOMETERS,
            )
        return cls(
            reference.zone_number,
            reference.band_letter,
            reference.column_letter,
            reference.row_letter,
            int(reference.easting_digits),
            int(reference.northing_digits),
            CoordinatePrecision.for_digits(reference.precision),
        )

    def to_reference(self) -> GridReference:
        if self.easting is None or self.northing is None:
            return GridReference(self.zone_number, self.band_letter, self.column_letter, self.row_letter)
        return GridReference(
            self.zone_number,
            self.band_letter,
            self.column_letter,
            self.row_letter,
            self.precision.format(self.easting),
            self.precision.format(self.northing),
        )

    def to_usng_string(self) -> str:
        """Spaced form; ``parse_usng`` of the result gives back an equal coordinate."""
        return self.to_reference().to_usng_string()

    def to_mgrs_string(self) -> str:
        return self.to_reference().to_mgrs_string()

    def __str__(self) -> str:
        return self.to_usng_string()
