"""
Python client for AZMet (Arizona Meteorological Network) hourly weather data.

Download a station's raw hourly file for a year and decode it into typed,
timestamped records.
"""

try:
    from importlib import metadata

    __version__ = metadata.version("azmet-hourly")
except Exception:
    __version__ = "unknown"

from .client import MAX_YEAR, MIN_YEAR, AZMetClient, validate_year
from .convenience import get_hourly_data
from .exceptions import (
    AZMetConnectionError,
    AZMetDataError,
    AZMetError,
    AZMetNotFoundError,
    AZMetShapeError,
    AZMetTimestampError,
    AZMetTimezoneError,
    AZMetTypeError,
    AZMetValidationError,
)
from .models import HourlyDataset, HourlyWeatherRecord
from .reader import read_hourly_data
from .schema import HOURLY_COLUMNS, Column, decode_row, parse_float, parse_int
from .stations import WeatherStation
from .timestamps import AZMET_TIMEZONE, resolve_timestamp

__all__ = [
    "__version__",
    # Client
    "AZMetClient",
    "validate_year",
    "MIN_YEAR",
    "MAX_YEAR",
    "get_hourly_data",
    # Decoding
    "read_hourly_data",
    "decode_row",
    "parse_int",
    "parse_float",
    "HOURLY_COLUMNS",
    "Column",
    "resolve_timestamp",
    "AZMET_TIMEZONE",
    # Models
    "WeatherStation",
    "HourlyWeatherRecord",
    "HourlyDataset",
    # Exceptions
    "AZMetError",
    "AZMetValidationError",
    "AZMetConnectionError",
    "AZMetNotFoundError",
    "AZMetDataError",
    "AZMetShapeError",
    "AZMetTypeError",
    "AZMetTimestampError",
    "AZMetTimezoneError",
]
