"""USNG/MGRS grid references.

Components:
    GridEncoder: Latitude/longitude to grid reference strings
    GridDecoder: Grid reference strings to cells and points
    GridReference: Parsed fields of a reference
    parse_grid_reference: Tolerant parser returning a ParseResult
    UsngCoordinate: Strictly validated reference value
    CoordinatePrecision: Area a reference denotes

Typical Usage:
    >>> from usngrid.grid import GridDecoder, GridEncoder
    >>> GridEncoder().encode(38.8895, -77.0353, 5)
    '18S UJ 2347 0648'
    >>> point = GridDecoder().decode("18S UJ 2347 0648", center=True)
"""

from .coordinate import CoordinatePrecision, UsngCoordinate
from .decoder import GridDecoder, reference_to_utm
from .encoder import (
    MAX_PRECISION,
    NAD27_SUFFIX,
    GridEncoder,
    digits_for_precision,
    encode_nad27,
    precision_for_diagonal,
    round_half_up,
)
from .parser import GrammarRule, ParseFailure, ParseResult, normalize, parse_grid_reference
from .reference import GridReference
from .tables import square_letters, total_northing

__all__ = [
    # Encoding
    "GridEncoder",
    "encode_nad27",
    "digits_for_precision",
    "precision_for_diagonal",
    "round_half_up",
    "MAX_PRECISION",
    "NAD27_SUFFIX",
    # Decoding
    "GridDecoder",
    "reference_to_utm",
    # Parsing
    "GridReference",
    "GrammarRule",
    "ParseFailure",
    "ParseResult",
    "normalize",
    "parse_grid_reference",
    # Strict values
    "UsngCoordinate",
    "CoordinatePrecision",
    # Tables
    "square_letters",
    "total_northing",
]
