"""Grid zone resolution: UTM zone numbers and latitude band letters.

Zone numbers run from 1 to 60 over [-180, 180), each six degrees wide.
Two regions break the regular pattern: the west coast of Norway, which
belongs to zone 32 between 56°N and 64°N, and Svalbard, where only the
odd zones 31 to 37 are used between 72°N and 84°N.

Band letters run from C (80°S) to X (84°N) in eight-degree steps,
skipping I and O; band X is twelve degrees tall. A latitude outside the
grid yields the sentinel band ``'Z'``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

import numpy as np

from usngrid.config import MAX_GRID_LATITUDE, MIN_GRID_LATITUDE
from usngrid.errors import InputRangeError

logger = logging.getLogger(__name__)

BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
OUT_OF_GRID_BAND = "Z"

# Southern and northern edge of each band. M and N stop just short of the
# equator so that a band box never straddles it.
_BAND_LATITUDES = {
    "C": (-80.0, -72.0),
    "D": (-72.0, -64.0),
    "E": (-64.0, -56.0),
    "F": (-56.0, -48.0),
    "G": (-48.0, -40.0),
    "H": (-40.0, -32.0),
    "J": (-32.0, -24.0),
    "K": (-24.0, -16.0),
    "L": (-16.0, -8.0),
    "M": (-8.0, -0.01),
    "N": (0.01, 8.0),
    "P": (8.0, 16.0),
    "Q": (16.0, 24.0),
    "R": (24.0, 32.0),
    "S": (32.0, 40.0),
    "T": (40.0, 48.0),
    "U": (48.0, 56.0),
    "V": (56.0, 64.0),
    "W": (64.0, 72.0),
    "X": (72.0, 84.0),
}

# Svalbard: (west, east, zone)
_SVALBARD_ZONES = (
    (0.0, 9.0, 31),
    (9.0, 21.0, 33),
    (21.0, 33.0, 35),
    (33.0, 42.0, 37),
)


def normalize_longitude(lon: float) -> float:
    """Map a longitude in [-180, 360] onto [-180, 180)."""
    return (lon + 180) - int((lon + 180) / 360) * 360 - 180


def resolve_zone_number(lat: float, lon: float) -> int:
    """UTM zone number for a position, including the Norway and Svalbard exceptions.

    Args:
        lat: Latitude in degrees, within [-80, 84].
        lon: Longitude in degrees, within [-180, 360].

    Returns:
        int: Zone number in [1, 60].

    Raises:
        InputRangeError: If the position is outside the accepted window.

    Example:
        >>> resolve_zone_number(38.8895, -77.0353)
        18
        >>> resolve_zone_number(61.0, 5.0)  # Norway
        32
    """
    lat = float(lat)
    lon = float(lon)
    if lon > 360 or lon < -180 or lat > MAX_GRID_LATITUDE or lat < MIN_GRID_LATITUDE:
        raise InputRangeError("resolve_zone_number", lat, lon)

    lon_temp = normalize_longitude(lon)
    zone_number = int((lon_temp + 180) / 6) + 1

    if 56.0 <= lat < 64.0 and 3.0 <= lon_temp < 12.0:
        zone_number = 32

    if 72.0 <= lat < 84.0:
        for west, east, svalbard_zone in _SVALBARD_ZONES:
            if west <= lon_temp < east:
                return svalbard_zone

    return zone_number


def band_letter(lat: float) -> str:
    """Latitude band letter, or ``'Z'`` outside [-80, 84].

    Example:
        >>> band_letter(38.8895)
        'S'
        >>> band_letter(83.9)
        'X'
    """
    lat = float(lat)
    if lat > MAX_GRID_LATITUDE or lat < MIN_GRID_LATITUDE:
        return OUT_OF_GRID_BAND

    index = (lat + 80) / 8
    if index >= 6:
        index += 1  # skip 'I'
    if index >= 12:
        index += 1  # skip 'O'
    if index >= 22:
        index -= 1  # 80 to 84 is still 'X'
    return chr(ord("C") + int(index))


def resolve_zone(lat: float, lon: float) -> tuple[int, str]:
    """Zone number and band letter of a position (its grid zone designation)."""
    return resolve_zone_number(lat, lon), band_letter(lat)


def band_latitudes(letter: str) -> tuple[float, float] | None:
    """(south, north) edges of a band, or None for an unknown letter."""
    return _BAND_LATITUDES.get(letter.upper()) if letter else None


def zone_longitudes(zone_number: int) -> tuple[float, float]:
    """(west, east) edges of a regular six-degree zone."""
    east = -180.0 + 6 * int(zone_number)
    return east - 6, east


def band_base_index(letter: str) -> int:
    """Position of a band letter in C..X, or -1 if it is not a band."""
    return BAND_LETTERS.find(letter.upper()) if letter else -1


def _build_grid_zone_bounds() -> dict[str, tuple[float, float, float, float]]:
    lon_step = 6
    lat_step = 8
    lons = np.arange(-180, 180, lon_step)
    lats = np.arange(-80, 80, lat_step)
    zone_labels = np.arange(1, 61)

    bounds = {}
    for i, band in enumerate(BAND_LETTERS):
        for j, zone in enumerate(zone_labels):
            bounds[f"{zone}{band}"] = (
                float(lons[j]),
                float(lats[i]),
                float(lons[j] + lon_step),
                float(lats[i] + lat_step),
            )

    for zone in zone_labels:
        bounds[f"{zone}X"] = (float(lons[zone - 1]), 72.0, float(lons[zone - 1] + lon_step), 84.0)
    bounds["31V"] = (0.0, 56.0, 3.0, 64.0)
    bounds["32V"] = (3.0, 56.0, 12.0, 64.0)
    for west, east, svalbard_zone in _SVALBARD_ZONES:
        bounds[f"{svalbard_zone}X"] = (west, 72.0, east, 84.0)
    del bounds["32X"]
    del bounds["34X"]
    del bounds["36X"]
    logger.debug("Built %d grid zone designations", len(bounds))
    return bounds


_GRID_ZONE_BOUNDS = MappingProxyType(_build_grid_zone_bounds())


def grid_zone_bounds() -> Mapping[str, tuple[float, float, float, float]]:
    """Bounds of every grid zone designation.

    Returns:
        Mapping: Read-only mapping such as ``"18S"`` to
        ``(west, south, east, north)`` in degrees. Norway and Svalbard
        cells carry their irregular widths and the unused designations
        32X, 34X and 36X are absent.
    """
    return _GRID_ZONE_BOUNDS
