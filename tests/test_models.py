"""
Tests for AZMet data models.
"""

import dataclasses
from datetime import datetime
from zoneinfo import ZoneInfo

import pandas as pd
import pytest

from azmet.models import HourlyDataset, HourlyWeatherRecord
from azmet.schema import decode_row
from azmet.stations import WeatherStation
from conftest import make_row

PHOENIX = ZoneInfo("America/Phoenix")


class TestHourlyWeatherRecord:
    """Test HourlyWeatherRecord."""

    def test_timestamp_cannot_be_passed(self):
        with pytest.raises(TypeError):
            HourlyWeatherRecord(*([2023, 1, 0] + [0.0] * 15), timestamp=datetime.now())

    def test_record_is_immutable(self):
        record = decode_row(make_row())
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.timestamp = datetime(2000, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.hour = 5

    def test_replace_recomputes_timestamp(self):
        record = decode_row(make_row(2023, 1, 0))
        moved = dataclasses.replace(record, day_of_year=32, hour=6)
        assert moved.timestamp == datetime(2023, 2, 1, 6, tzinfo=PHOENIX)
        assert record.timestamp == datetime(2023, 1, 1, tzinfo=PHOENIX)

    def test_to_dict(self):
        record = decode_row(make_row())
        data = record.to_dict()
        assert len(data) == 19
        assert data["year"] == 2023
        assert data["timestamp"] == record.timestamp


class TestHourlyDataset:
    """Test HourlyDataset."""

    @pytest.fixture
    def dataset(self):
        return HourlyDataset(
            records=[decode_row(make_row(2023, 1, hour)) for hour in (1, 2, 3)],
            station=WeatherStation.TUCSON,
            year=2023,
        )

    def test_sequence_protocol(self, dataset):
        assert len(dataset) == 3
        assert [record.hour for record in dataset] == [1, 2, 3]
        assert dataset[-1].hour == 3
        assert not dataset.is_empty()

    def test_append(self):
        dataset = HourlyDataset()
        assert dataset.is_empty()
        record = decode_row(make_row())
        dataset.append(record)
        dataset.append(record)
        assert len(dataset) == 2

    def test_to_pandas(self, dataset):
        df = dataset.to_pandas()

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 3
        assert list(df.columns[:3]) == ["year", "day_of_year", "hour"]
        assert df.columns[-1] == "timestamp"
        assert df["year"].dtype == "int64"
        assert df["air_temperature"].dtype == "float32"
        assert df["hour"].tolist() == [1, 2, 3]
        assert df["timestamp"].iloc[0] == pd.Timestamp(
            datetime(2023, 1, 1, 1, tzinfo=PHOENIX)
        )

    def test_to_pandas_empty(self):
        df = HourlyDataset().to_pandas()
        assert df.empty
        assert len(df.columns) == 19
