"""
Timestamp derivation for AZMet hourly observations.
"""

import logging
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import AZMetTimestampError, AZMetTimezoneError

logger = logging.getLogger(__name__)

# AZMet reports in Arizona local time, which does not observe daylight saving.
AZMET_TIMEZONE = "America/Phoenix"

DAYS_IN_LEAP_YEAR = 366


def load_timezone(tz_name: str = AZMET_TIMEZONE) -> tzinfo:
    """
    Load a timezone from the IANA tz database.

    Raises:
        AZMetTimezoneError: If the timezone is unknown or tz data is missing
    """
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise AZMetTimezoneError(f"Unable to resolve timezone {tz_name!r}") from e


def resolve_timestamp(
    year: int, day_of_year: int, hour: int, tz_name: str = AZMET_TIMEZONE
) -> datetime:
    """
    Convert an AZMet (year, day-of-year, hour) triple to an aware datetime.

    The result is local midnight on January 1 of ``year`` advanced by
    ``hour`` hours and ``day_of_year - 1`` days. Expressing the date as an
    offset from a fixed anchor handles month boundaries and leap years
    without any calendar lookups.

    Day-of-year is not range-checked: a value past the end of the year
    rolls over into the following year.

    Args:
        year: Four digit year
        day_of_year: 1-based ordinal day within the year
        hour: Observation hour
        tz_name: IANA timezone name the observation is reported in

    Returns:
        Timezone-aware datetime for the observation

    Raises:
        AZMetTimezoneError: If the timezone cannot be loaded
        AZMetTimestampError: If the result is outside the supported date range
    """
    tz = load_timezone(tz_name)

    if not 1 <= day_of_year <= DAYS_IN_LEAP_YEAR:
        logger.debug(
            f"Day of year {day_of_year} is outside 1-{DAYS_IN_LEAP_YEAR}, "
            f"rolling over from {year}"
        )

    try:
        first_of_year = datetime(year, 1, 1, tzinfo=tz)
        return first_of_year + timedelta(days=day_of_year - 1, hours=hour)
    except (ValueError, OverflowError) as e:
        raise AZMetTimestampError(
            f"Unable to derive timestamp for year={year}, "
            f"day={day_of_year}, hour={hour}: {e}"
        ) from e
