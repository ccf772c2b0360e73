"""
Exceptions for AZMet operations.
"""

from typing import Optional


class AZMetError(Exception):
    """Base exception for AZMet-related errors."""

    pass


class AZMetValidationError(AZMetError):
    """Invalid input supplied before any data is retrieved."""

    pass


class AZMetConnectionError(AZMetError):
    """Error retrieving data from the AZMet server."""

    pass


class AZMetNotFoundError(AZMetConnectionError):
    """The requested station/year file does not exist on the server."""

    pass


class AZMetTimezoneError(AZMetError):
    """The reporting timezone could not be loaded from the tz database."""

    pass


class AZMetDataError(AZMetError):
    """Error decoding a row of hourly data."""

    def __init__(self, message: str, row_number: Optional[int] = None):
        if row_number is not None:
            message = f"row {row_number}: {message}"
        super().__init__(message)
        self.row_number = row_number


class AZMetShapeError(AZMetDataError):
    """A row does not have the expected number of fields."""

    def __init__(
        self, field_count: int, expected: int, row_number: Optional[int] = None
    ):
        super().__init__(
            f"invalid field count for hourly weather data, expected {expected} "
            f"fields, received {field_count}",
            row_number,
        )
        self.field_count = field_count
        self.expected = expected


class AZMetTypeError(AZMetDataError):
    """A field could not be parsed as its declared type."""

    def __init__(
        self,
        field_name: str,
        column: int,
        value: str,
        type_name: str,
        row_number: Optional[int] = None,
    ):
        super().__init__(
            f"unable to parse {type_name} for field '{field_name}' "
            f"(column {column}): {value!r}",
            row_number,
        )
        self.field_name = field_name
        self.column = column
        self.value = value
        self.type_name = type_name


class AZMetTimestampError(AZMetDataError):
    """The year/day/hour triple falls outside the representable date range."""

    pass
