"""USNG and MGRS strings back to UTM and latitude/longitude.

A square letter pair only fixes the northing modulo 2,000,000 m, so the
decoder lifts the row's northing into the cycle that covers the band
letter (``tables.total_northing``). Southern bands carry the 10,000,000 m
false northing, which is removed before the inverse projection.

By default a reference decodes to the cell it names, as a BoundingBox;
with ``center=True`` it decodes to the middle of the positions that
encode to the reference, which at 1 m precision is the reference's own
easting and northing. A grid zone
designation with no square letters decodes to the zone's table bounds.
Text that does not parse decodes to None.
"""

from __future__ import annotations

import logging

from usngrid.geo import BoundingBox, GeoPoint
from usngrid.projection import Hemisphere, TransverseMercator, UtmCoordinate
from usngrid.unit import Meter
from usngrid.zones import grid_zone_bounds

from .encoder import MAX_DIGITS
from .parser import parse_grid_reference
from .reference import GridReference
from .tables import column_easting, row_northing, total_northing

logger = logging.getLogger(__name__)


def reference_to_utm(reference: GridReference) -> UtmCoordinate | None:
    """UTM coordinates of the south-west corner of a reference's cell.

    Southern bands are reported with the false northing and an ``S``
    hemisphere flag.

    Returns:
        UtmCoordinate | None: None when the reference has no square letters.
    """
    if reference.square_id is None:
        return None

    easting = column_easting(reference.column_letter)
    northing = row_northing(reference.zone_number, reference.row_letter)
    if easting is None or northing is None:
        logger.debug("Square %s is not part of zone %d", reference.square_id, reference.zone_number)
        return None

    northing = total_northing(northing, reference.band_letter)
    if reference.precision:
        scale = 10 ** (MAX_DIGITS - reference.precision)
        easting += int(reference.easting_digits) * scale
        northing += int(reference.northing_digits) * scale

    hemisphere = Hemisphere.S if reference.band_letter < "N" else Hemisphere.N
    return UtmCoordinate(
        float(easting), float(int(northing)), reference.zone_number, reference.band_letter, hemisphere
    )


class GridDecoder:
    """Turns grid reference text into positions and cells."""

    def __init__(self, projection: TransverseMercator | None = None):
        self._projection = projection or TransverseMercator()

    @property
    def projection(self) -> TransverseMercator:
        return self._projection

    def decode_to_utm(self, text: str | None) -> UtmCoordinate | None:
        """UTM coordinates a grid reference names, or None if it does not parse."""
        result = parse_grid_reference(text)
        if not result.ok:
            return None
        return reference_to_utm(result.reference)

    def decode(self, text: str | None, center: bool = False) -> GeoPoint | BoundingBox | None:
        """Decode grid reference text.

        Args:
            text: Reference such as ``"18S UJ 2348 0648"``; spaces optional.
            center: Return the center of the cell instead of its bounds.
                This is the middle of the positions that encode to the
                reference, not the south-west corner that usng.js
                ``USNGtoLL`` returns for its center flag.

        Returns:
            GeoPoint | BoundingBox | None: The cell or its center, or None
            when the text is not a grid reference.

        Example:
            >>> decoder = GridDecoder()
            >>> cell = decoder.decode("18S UJ 2348 0648")
            >>> round(cell.south, 4), round(cell.west, 4)
            (38.8895, -77.0353)
        """
        result = parse_grid_reference(text)
        if not result.ok:
            return None
        return self.decode_reference(result.reference, center)

    def decode_reference(self, reference: GridReference, center: bool = False) -> GeoPoint | BoundingBox | None:
        """Decode an already parsed reference; see ``decode``."""
        if reference.square_id is None:
            return self._decode_zone(reference, center)

        utm = reference_to_utm(reference)
        if utm is None:
            return None

        cell = reference.cell_size
        if center:
            # digits are cut from a position rounded to the meter, so the
            # positions sharing them start half a meter before the cell
            offset = cell / 2 - 0.5
            return self._projection.unproject(utm.signed_northing() + offset, utm.easting + offset, utm.zone_number)
        return self._projection.unproject(utm.signed_northing(), utm.easting, utm.zone_number, Meter(cell))

    def _decode_zone(self, reference: GridReference, center: bool) -> GeoPoint | BoundingBox | None:
        bounds = grid_zone_bounds().get(reference.grid_zone_designation)
        if bounds is None:
            logger.debug("%s is not a grid zone designation", reference.grid_zone_designation)
            return None
        west, south, east, north = bounds
        box = BoundingBox(north=north, south=south, east=east, west=west)
        return box.center if center else box
