"""
Registry of AZMet weather stations.

Each station is identified by the numeric code the Arizona Meteorological
Network assigns to it. The code is used verbatim when building data file
names, so the values here must match the provider's station list.
"""

from enum import IntEnum
from typing import Union

from .exceptions import AZMetValidationError


class WeatherStation(IntEnum):
    """AZMet station and its provider-assigned code."""

    AGUILA = 7
    BONITA = 9
    BOWIE = 33
    BUCKEYE = 26
    COOLIDGE = 5
    DESERT_RIDGE = 27
    HARQUAHALA = 23
    MARICOPA = 6
    MOHAVE = 20
    MOHAVE_2 = 28
    FT_MOHAVE = 40
    PALOMA = 19
    PARKER = 8
    PARKER_2 = 35
    PAYSON = 32
    PHOENIX_GREENWAY = 12
    PHOENIX_ENCANTO = 15
    QUEEN_CREEK = 22
    ROLL = 24
    SAFFORD = 4
    SAHUARITA = 38
    SALOME = 41
    SAN_SIMON = 37
    TUCSON = 1
    WILLCOX = 39
    YUMA_NORTH = 14
    YUMA_SOUTH = 36
    YUMA_VALLEY = 2

    @property
    def code(self) -> int:
        """Numeric station code used by the data provider."""
        return int(self.value)

    @property
    def display_name(self) -> str:
        """Human readable station name, e.g. 'Phoenix Greenway'."""
        return self.name.replace("_", " ").title()

    @classmethod
    def lookup(cls, value: Union["WeatherStation", int, str]) -> "WeatherStation":
        """
        Resolve a station from a member, a numeric code or a name.

        Names are matched ignoring case, and spaces or hyphens are treated
        as underscores, so "phoenix greenway", "Phoenix-Greenway" and
        "PHOENIX_GREENWAY" all resolve to the same station.

        Args:
            value: Station member, integer code, numeric string or name

        Returns:
            The matching WeatherStation

        Raises:
            AZMetValidationError: If no registered station matches
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise AZMetValidationError(
                    f"Unknown AZMet station code: {value}"
                ) from None

        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.lookup(int(text))
            key = text.upper().replace("-", "_").replace(" ", "_")
            if key in cls.__members__:
                return cls.__members__[key]

        raise AZMetValidationError(f"Unknown AZMet station: {value!r}")
