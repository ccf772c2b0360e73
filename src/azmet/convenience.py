"""
High-level convenience functions for AZMet data access.
"""

from typing import Union

from .client import AZMetClient
from .models import HourlyDataset
from .stations import WeatherStation


def get_hourly_data(
    station: Union[WeatherStation, int, str],
    year: int,
    timeout: float = AZMetClient.DEFAULT_TIMEOUT,
) -> HourlyDataset:
    """
    Download a year of hourly weather data for one AZMet station.

    A client is opened for the single request and closed afterwards.

    Args:
        station: Station member, code or name (e.g. 'Phoenix Greenway')
        year: Four digit year between 2003 and 2099
        timeout: Request timeout in seconds

    Returns:
        HourlyDataset with one record per hour in the source file

    Examples:
        >>> data = get_hourly_data(WeatherStation.TUCSON, 2023)
        >>> df = data.to_pandas()
    """
    with AZMetClient(timeout=timeout) as client:
        return client.get_hourly_data(station, year)
