"""
Data models for AZMet hourly weather data.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .stations import WeatherStation
from .timestamps import resolve_timestamp

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class HourlyWeatherRecord:
    """
    One hourly observation from an AZMet raw hourly data file.

    Fields are declared in the same order as the columns of the source file.
    ``timestamp`` is derived from ``year``, ``day_of_year`` and ``hour`` when
    the record is created and cannot be passed in; use
    ``dataclasses.replace()`` to get a record with a recomputed timestamp.
    """

    year: int
    day_of_year: int
    hour: int
    air_temperature: float  # degC
    relative_humidity: float  # percent
    vapor_pressure_deficit: float  # kPa
    solar_radiation: float  # MJ/m2
    precipitation: float  # mm
    soil_temp_4in: float  # degC
    soil_temp_20in: float  # degC
    wind_speed_avg: float  # m/s
    wind_vector_magnitude: float  # m/s
    wind_vector_direction: float  # degrees
    wind_direction_std_dev: float  # degrees
    wind_speed_max: float  # m/s
    evapotranspiration: float  # mm
    vapor_pressure_actual: float  # kPa
    dewpoint_hourly_avg: float  # degC
    timestamp: datetime = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "timestamp",
            resolve_timestamp(self.year, self.day_of_year, self.hour),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class HourlyDataset:
    """Ordered hourly records for one station and year."""

    records: List[HourlyWeatherRecord] = field(default_factory=list)
    station: Optional[WeatherStation] = None
    year: Optional[int] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[HourlyWeatherRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> HourlyWeatherRecord:
        return self.records[index]

    def append(self, record: HourlyWeatherRecord) -> None:
        """Add a record at the end of the dataset."""
        self.records.append(record)

    def is_empty(self) -> bool:
        """Check if the dataset holds no records."""
        return len(self.records) == 0

    def to_pandas(self) -> "pd.DataFrame":
        """
        Convert to a pandas DataFrame, one row per record.

        Integer columns become int64 and measurement columns float32.
        The ``timestamp`` column keeps the reporting timezone.
        """
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "pandas is required for DataFrame conversion. Install with: pip install pandas"
            ) from None

        record_fields = fields(HourlyWeatherRecord)
        columns = [f.name for f in record_fields]
        dtypes = {
            f.name: "int64" if f.type is int else "float32"
            for f in record_fields
            if f.init
        }

        df = pd.DataFrame([record.to_dict() for record in self.records], columns=columns)
        return df.astype(dtypes)
