"""
Column schema and row decoder for AZMet raw hourly data files.

The files have no header row, so a column's meaning is determined solely by
its position. ``HOURLY_COLUMNS`` lists every column in file order together
with the type it must parse as.
"""

import math
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence, Tuple, Type

from .exceptions import AZMetShapeError, AZMetTimestampError, AZMetTypeError
from .models import HourlyWeatherRecord


class Column(NamedTuple):
    """A positional column: record field name and expected type."""

    name: str
    kind: Type


HOURLY_COLUMNS: Tuple[Column, ...] = (
    Column("year", int),
    Column("day_of_year", int),
    Column("hour", int),
    Column("air_temperature", float),
    Column("relative_humidity", float),
    Column("vapor_pressure_deficit", float),
    Column("solar_radiation", float),
    Column("precipitation", float),
    Column("soil_temp_4in", float),
    Column("soil_temp_20in", float),
    Column("wind_speed_avg", float),
    Column("wind_vector_magnitude", float),
    Column("wind_vector_direction", float),
    Column("wind_direction_std_dev", float),
    Column("wind_speed_max", float),
    Column("evapotranspiration", float),
    Column("vapor_pressure_actual", float),
    Column("dewpoint_hourly_avg", float),
)

FIELD_COUNT = len(HOURLY_COLUMNS)

FLOAT32_MAX = 3.4028234663852886e38


def _check_literal(value: str) -> None:
    if "_" in value or value != value.strip():
        raise ValueError(f"invalid numeric literal: {value!r}")


def parse_int(value: str) -> int:
    """Parse an integer column value."""
    _check_literal(value)
    return int(value)


def parse_float(value: str) -> float:
    """
    Parse a decimal column value.

    Values must fit in a 32-bit float; infinities and NaN are passed through.
    """
    _check_literal(value)
    result = float(value)
    if math.isfinite(result) and abs(result) > FLOAT32_MAX:
        raise ValueError(f"value out of 32-bit float range: {value!r}")
    return result


PARSERS: Dict[Type, Callable[[str], Any]] = {
    int: parse_int,
    float: parse_float,
}


def decode_row(
    row: Sequence[str], row_number: Optional[int] = None
) -> HourlyWeatherRecord:
    """
    Decode one row of an hourly data file into a record.

    Args:
        row: Text fields of the row, in file order
        row_number: Optional 1-based row number used in error messages

    Returns:
        HourlyWeatherRecord with its timestamp resolved

    Raises:
        AZMetShapeError: If the row does not have exactly 18 fields
        AZMetTypeError: If a field cannot be parsed as its declared type
    """
    if len(row) != FIELD_COUNT:
        raise AZMetShapeError(len(row), FIELD_COUNT, row_number)

    values: Dict[str, Any] = {}
    for index, (column, raw) in enumerate(zip(HOURLY_COLUMNS, row), start=1):
        try:
            values[column.name] = PARSERS[column.kind](raw)
        except ValueError:
            raise AZMetTypeError(
                column.name, index, raw, column.kind.__name__, row_number
            ) from None

    try:
        return HourlyWeatherRecord(**values)
    except AZMetTimestampError as e:
        if row_number is None:
            raise
        raise AZMetTimestampError(str(e), row_number) from e
