"""Tolerant parser for USNG and MGRS grid reference text.

The grammar is walked rule by rule through a StateMachine:

    START -> ZONE -> BAND -> SQUARE -> DIGITS

ZONE is one digit, or two when the second character is also a digit.
BAND is one band letter, SQUARE two square letters and DIGITS an even
run of digits split into equal easting and northing halves. Text may
stop after BAND (a grid zone designation such as ``18S``) or after
SQUARE (a 100 km square such as ``18S UJ``).

Spaces and URL-encoded spaces (``%20``) are ignored and letters may be
lower case. Failures are reported as a ParseFailure rather than raised,
so callers can probe arbitrary text.

Example:
    >>> result = parse_grid_reference("18s uj 2348 0648")
    >>> result.reference.to_usng_string()
    '18S UJ 2348 0648'
    >>> parse_grid_reference("18").failure
    <ParseFailure.BAD_LETTERS: 'missing or invalid letters'>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from usngrid.state import Action, StateGraph, StateMachine
from usngrid.zones import BAND_LETTERS

from .reference import GridReference

logger = logging.getLogger(__name__)

COLUMN_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ"
ROW_ALPHABET = "ABCDEFGHJKLMNPQRSTUV"
_ASCII_DIGITS = frozenset("0123456789")

MAX_ZONE = 60
MAX_DIGIT_PAIRS = 5


class ParseFailure(Enum):
    """Reasons a grid reference could not be parsed."""

    EMPTY = "empty input"
    TOO_SHORT = "fewer than two characters"
    BAD_ZONE = "invalid zone number"
    BAD_LETTERS = "missing or invalid letters"
    UNEVEN_DIGITS = "easting and northing differ in length"
    BAD_DIGITS = "invalid easting or northing digits"


class GrammarRule(Enum):
    START = auto()
    ZONE = auto()
    BAND = auto()
    SQUARE = auto()
    DIGITS = auto()


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing: a GridReference, or the reason there is none."""

    reference: GridReference | None = None
    failure: ParseFailure | None = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.reference is not None


def normalize(text: str) -> str:
    """Upper-case ``text`` and drop spaces and ``%20`` escapes."""
    return text.upper().replace("%20", "").replace(" ", "")


def _is_digits(text: str) -> bool:
    return bool(text) and all(char in _ASCII_DIGITS for char in text)


class _Scanner:
    """Cursor over normalized text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        return self.text[self.pos + offset : self.pos + offset + 1]

    def take(self, count: int) -> str:
        chunk = self.text[self.pos : self.pos + count]
        self.pos += len(chunk)
        return chunk

    def rest(self) -> str:
        return self.take(len(self.text) - self.pos)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)


# ---------------------------------------------------------------- grammar rules
# Each rule consumes its part of the text into ``fields`` and returns a
# ParseFailure, or None when the part is well formed.


def _read_zone(scanner: _Scanner, fields: dict[str, Any]) -> ParseFailure | None:
    width = 2 if scanner.peek(1) in _ASCII_DIGITS else 1
    zone = scanner.take(width)
    if not _is_digits(zone) or not 1 <= int(zone) <= MAX_ZONE:
        return ParseFailure.BAD_ZONE
    fields["zone_number"] = int(zone)
    return None


def _read_band(scanner: _Scanner, fields: dict[str, Any]) -> ParseFailure | None:
    band = scanner.take(1)
    if not band or band not in BAND_LETTERS:
        return ParseFailure.BAD_LETTERS
    fields["band_letter"] = band
    return None


def _read_square(scanner: _Scanner, fields: dict[str, Any]) -> ParseFailure | None:
    square = scanner.take(2)
    if len(square) != 2 or square[0] not in COLUMN_ALPHABET or square[1] not in ROW_ALPHABET:
        return ParseFailure.BAD_LETTERS
    fields["column_letter"], fields["row_letter"] = square
    return None


def _read_digits(scanner: _Scanner, fields: dict[str, Any]) -> ParseFailure | None:
    digits = scanner.rest()
    if len(digits) % 2:
        return ParseFailure.UNEVEN_DIGITS
    if digits and (not _is_digits(digits) or len(digits) > 2 * MAX_DIGIT_PAIRS):
        return ParseFailure.BAD_DIGITS
    half = len(digits) // 2
    fields["easting_digits"] = digits[:half]
    fields["northing_digits"] = digits[half:]
    return None


_GRAMMAR: StateGraph = {
    GrammarRule.START: {Action(GrammarRule.ZONE, _read_zone)},
    GrammarRule.ZONE: {Action(GrammarRule.BAND, _read_band)},
    GrammarRule.BAND: {Action(GrammarRule.SQUARE, _read_square)},
    GrammarRule.SQUARE: {Action(GrammarRule.DIGITS, _read_digits)},
}

# Rules after which the text may end
_ACCEPTING = frozenset({GrammarRule.BAND, GrammarRule.SQUARE, GrammarRule.DIGITS})


def parse_grid_reference(text: str | None) -> ParseResult:
    """Parse grid reference text into its fields.

    Args:
        text: Text such as ``"18S UJ 2348 0648"``, ``"18SUJ23480648"``
            or ``"18S"``.

    Returns:
        ParseResult: ``reference`` is set on success, ``failure`` otherwise.
    """
    normalized = normalize(text) if text else ""
    if not normalized:
        return _fail(ParseFailure.EMPTY, text)
    if len(normalized) < 2:
        return _fail(ParseFailure.TOO_SHORT, text)

    scanner = _Scanner(normalized)
    fields: dict[str, Any] = {}
    machine = StateMachine(GrammarRule.START, _GRAMMAR)

    while not (scanner.at_end() and machine.current in _ACCEPTING):
        successors = _GRAMMAR.get(machine.current)
        if not successors:
            return _fail(ParseFailure.BAD_DIGITS, text)
        (action,) = successors
        failure = machine.request_transition(action.state, scanner, fields)
        if failure is not None:
            return _fail(failure, text)

    return ParseResult(reference=GridReference(**fields), text=text or "")


def _fail(failure: ParseFailure, text: str | None) -> ParseResult:
    logger.debug("Cannot parse grid reference %r: %s", text, failure.value)
    return ParseResult(failure=failure, text=text or "")
