"""Lookup tables for 100 km grid square identifiers.

There are six zone sets: zones 1-6 each have their own set of square
letters, zones 7-12 repeat them, and so on. Column letters depend on the
set, row letters on whether the set is odd or even. Columns repeat every
8 squares and rows every 20 squares (2,000,000 m), so a square letter
pair only fixes the northing modulo 2,000,000 m; the band letter is
needed to pick the right cycle.

See p. 10 of the "United States National Grid" white paper.
"""

from __future__ import annotations

import math

from usngrid.config import BLOCK_SIZE, GRIDSQUARE_SET_COL_SIZE, GRIDSQUARE_SET_ROW_SIZE, NORTHING_CYCLE
from usngrid.zones import band_base_index

ROW_LETTERS_ODD = "ABCDEFGHJKLMNPQRSTUV"
ROW_LETTERS_EVEN = "FGHJKLMNPQRSTUVABCDE"

COLUMN_LETTERS = ("ABCDEFGH", "JKLMNPQR", "STUVWXYZ")

# Easting of each column letter in units of 100 km: A, J and S are the
# first column (100,000 m) of their set, B, K and T the second, ...
EASTING_LETTER_GROUPS = ("", "AJS", "BKT", "CLU", "DMV", "ENW", "FPX", "GQY", "HRZ")

# Approximate northing of each band's southern edge, bands C through X,
# in meters modulo 10,000,000
ZONE_BASE_NORTHINGS = (
    1_100_000,
    2_000_000,
    2_800_000,
    3_700_000,
    4_600_000,
    5_500_000,
    6_400_000,
    7_300_000,
    8_200_000,
    9_100_000,
    0,
    800_000,
    1_700_000,
    2_600_000,
    3_500_000,
    4_400_000,
    5_300_000,
    6_200_000,
    7_000_000,
    7_900_000,
)


def find_set(zone_number: int) -> int:
    """Zone set (1-6) of a zone."""
    return (int(zone_number) - 1) % 6 + 1


def row_letters(zone_number: int) -> str:
    """Row alphabet of a zone; even zones are shifted by five letters."""
    return ROW_LETTERS_EVEN if int(zone_number) % 2 == 0 else ROW_LETTERS_ODD


def column_letters(zone_number: int) -> str:
    """Column alphabet of a zone."""
    return COLUMN_LETTERS[(find_set(zone_number) - 1) % 3]


def _blocks(meters: int) -> int:
    """Whole 100 km blocks in a non-negative distance; 0 for negatives."""
    return max(0, meters // BLOCK_SIZE)


def square_letters(zone_number: int, northing: int, easting: int) -> str:
    """Two-letter 100 km square identifier of a UTM position.

    Args:
        zone_number: UTM zone.
        northing: Northing in whole meters, false northing applied in the south.
        easting: Easting in whole meters.

    Returns:
        str: Column letter followed by row letter, e.g. ``"UJ"``.
    """
    # rows and columns count from 1; a remainder of 0 is the last row/column
    row = (1 + _blocks(northing)) % GRIDSQUARE_SET_ROW_SIZE
    col = _blocks(easting) % GRIDSQUARE_SET_COL_SIZE
    row = (row or GRIDSQUARE_SET_ROW_SIZE) - 1
    col = (col or GRIDSQUARE_SET_COL_SIZE) - 1
    return column_letters(zone_number)[col] + row_letters(zone_number)[row]


def column_easting(letter: str) -> int | None:
    """Easting of the western edge of a column letter's square, or None if unknown."""
    for index, group in enumerate(EASTING_LETTER_GROUPS):
        if letter and letter in group:
            return index * BLOCK_SIZE
    return None


def row_northing(zone_number: int, letter: str) -> int | None:
    """Northing of a row letter's square within one 2,000,000 m cycle, or None if unknown."""
    index = row_letters(zone_number).find(letter) if letter else -1
    if index < 0:
        return None
    return index * BLOCK_SIZE


def band_base_northing(band: str) -> int | None:
    """Approximate southern-edge northing of a band, or None for an unknown band."""
    index = band_base_index(band)
    return ZONE_BASE_NORTHINGS[index] if index >= 0 else None


def total_northing(northing: float, band: str) -> float:
    """Lift a northing into the 2,000,000 m cycle that covers ``band``.

    Adds whole cycles until the value is at least the band's base
    northing. Unknown bands leave the northing unchanged.
    """
    base = band_base_northing(band)
    if base is None or northing >= base:
        return northing
    return northing + math.ceil((base - northing) / NORTHING_CYCLE) * NORTHING_CYCLE
