"""Exceptions raised by the grid converter."""


class UsngError(Exception):
    """Base class for all converter errors."""


class InputRangeError(UsngError, ValueError):
    """Latitude or longitude outside the window an operation accepts.

    Attributes:
        latitude: The offending latitude, in degrees.
        longitude: The offending longitude, in degrees.
    """

    def __init__(self, operation: str, latitude: float, longitude: float):
        self.operation = operation
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"{operation}: invalid input. lat: {latitude:.4f} lon: {longitude:.4f}"
        )


class GridReferenceParseError(UsngError, ValueError):
    """Text that does not follow the USNG or MGRS grammar.

    Raised by the strict parsers only; the tolerant decoder reports
    malformed text by returning None.
    """

    def __init__(self, text: str, notation: str = "USNG"):
        self.text = text
        self.notation = notation
        super().__init__(f"Supplied argument '{text}' is not a valid {notation} formatted String.")
