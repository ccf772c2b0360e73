"""
HTTP client for AZMet raw hourly data files.
"""

import logging
import time
from typing import Any, Optional, Union

import httpx

from .exceptions import (
    AZMetConnectionError,
    AZMetNotFoundError,
    AZMetValidationError,
)
from .models import HourlyDataset
from .reader import read_hourly_data
from .stations import WeatherStation

logger = logging.getLogger(__name__)

# Earliest year AZMet publishes raw hourly files for.
MIN_YEAR = 2003
# File names carry a two-digit year, which would wrap after 2099.
MAX_YEAR = 2099


def validate_year(year: int) -> int:
    """
    Check that hourly data can be requested for ``year``.

    Raises:
        AZMetValidationError: If the year is outside MIN_YEAR..MAX_YEAR
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise AZMetValidationError(f"Year must be an integer, got {year!r}")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise AZMetValidationError(
            f"Invalid year to fetch AZMet hourly data: {year} "
            f"(supported range {MIN_YEAR}-{MAX_YEAR})"
        )
    return year


class AZMetClient:
    """
    Client for downloading AZMet raw hourly weather data.

    The Arizona Meteorological Network publishes one comma-separated text
    file per station per year. Each row is one hourly observation with 18
    positional fields and there is no header row.
    """

    BASE_URL = "https://cals.arizona.edu/azmet/data"
    FILENAME_TEMPLATE = "{year_suffix}{station_code}rh.txt"
    DEFAULT_TIMEOUT = 10.0
    USER_AGENT = "azmet-hourly-client/0.1.0"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={
                "User-Agent": self.USER_AGENT,
                "Accept": "text/plain",
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "AZMetClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def build_url(self, station: Union[WeatherStation, int, str], year: int) -> str:
        """
        Build the raw hourly data URL for a station and year.

        The file name is the two-digit year followed by the station code,
        e.g. station 12 in 2024 is ``2412rh.txt``.

        Args:
            station: Station member, code or name
            year: Four digit year between MIN_YEAR and MAX_YEAR

        Returns:
            Absolute URL of the data file
        """
        station = WeatherStation.lookup(station)
        validate_year(year)
        filename = self.FILENAME_TEMPLATE.format(
            year_suffix=f"{year % 100:02d}", station_code=station.code
        )
        return f"{self.base_url}/{filename}"

    def fetch(self, url: str) -> httpx.Response:
        """
        Start a single streaming GET request for ``url``.

        The returned response is open and its body has not been read; the
        caller is responsible for closing it.

        Raises:
            AZMetConnectionError: On timeout, transport failure or a
                non-success status code
        """
        logger.debug(f"Fetching {url}")
        request = self._client.build_request("GET", url)

        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise AZMetConnectionError(f"Request timeout after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise AZMetConnectionError(f"Network error: {e}") from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            response.close()
            status = e.response.status_code
            if status == 404:
                raise AZMetNotFoundError(f"No hourly data file at {url}") from e
            elif status >= 500:
                raise AZMetConnectionError(
                    "AZMet service temporarily unavailable"
                ) from e
            else:
                raise AZMetConnectionError(f"HTTP error {status}: {e}") from e

        return response

    def get_hourly_data(
        self, station: Union[WeatherStation, int, str], year: int
    ) -> HourlyDataset:
        """
        Download and decode a year of hourly data for a station.

        The year is validated before any URL is built, so an out-of-range
        year never reaches the network.

        Args:
            station: Station member, code or name
            year: Four digit year between MIN_YEAR and MAX_YEAR

        Returns:
            HourlyDataset tagged with the station and year

        Raises:
            AZMetValidationError: If the station or year is invalid
            AZMetConnectionError: If the file cannot be retrieved within
                the client timeout
            AZMetDataError: If any row fails to decode
        """
        validate_year(year)
        station = WeatherStation.lookup(station)

        url = self.build_url(station, year)
        # httpx timeouts apply per read; the deadline bounds the whole transfer.
        deadline = time.monotonic() + self.timeout
        dataset = read_hourly_data(
            self.fetch(url), deadline=deadline, timeout=self.timeout
        )
        dataset.station = station
        dataset.year = year

        logger.debug(
            f"Retrieved {len(dataset)} hourly records for "
            f"{station.display_name} ({year})"
        )
        return dataset
