"""
Command line interface for downloading AZMet hourly data.
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from .client import MAX_YEAR, MIN_YEAR, AZMetClient
from .exceptions import AZMetError, AZMetValidationError
from .stations import WeatherStation

logger = logging.getLogger(__name__)


def _station_arg(value: str) -> WeatherStation:
    try:
        return WeatherStation.lookup(value)
    except AZMetValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="azmet-hourly",
        description="Download a year of AZMet raw hourly weather data",
    )
    p.add_argument(
        "-y",
        "--year",
        type=int,
        default=datetime.now().year,
        help=f"the year to fetch data for, between {MIN_YEAR} and {MAX_YEAR} (default: current year)",
    )
    p.add_argument(
        "-s",
        "--station",
        type=_station_arg,
        default=WeatherStation.PHOENIX_GREENWAY,
        help="station name or code (default: Phoenix Greenway)",
    )
    p.add_argument(
        "-o",
        "--output",
        help="write the records to this CSV file instead of printing them",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=AZMetClient.DEFAULT_TIMEOUT,
        help="request timeout in seconds",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    p.add_argument(
        "--list-stations", action="store_true", help="list known stations and exit"
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_stations:
        for station in sorted(WeatherStation, key=lambda s: s.code):
            print(f"{station.code:>3}  {station.display_name}")
        return 0

    try:
        with AZMetClient(timeout=args.timeout) as client:
            dataset = client.get_hourly_data(args.station, args.year)
    except AZMetError as e:
        logger.error(f"Error retrieving weather data: {e}")
        return 1

    df = dataset.to_pandas()
    if args.output:
        df.to_csv(args.output, index=False)
        logger.info(f"Wrote {len(df)} records to {args.output}")
    else:
        print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
