"""
Assembles hourly datasets from raw AZMet CSV streams.
"""

import csv
import logging
import time
from contextlib import closing
from typing import Any, Iterator, Optional

import httpx

from .exceptions import AZMetConnectionError, AZMetDataError
from .models import HourlyDataset
from .schema import decode_row

logger = logging.getLogger(__name__)


def _check_deadline(deadline: Optional[float], timeout: Optional[float]) -> None:
    if deadline is not None and time.monotonic() > deadline:
        raise AZMetConnectionError(f"Request timeout after {timeout}s")


def _iter_response_lines(
    response: httpx.Response, deadline: Optional[float], timeout: Optional[float]
) -> Iterator[str]:
    """Split a streamed response body into lines, checking the deadline per chunk."""
    pending = ""
    for chunk in response.iter_text():
        _check_deadline(deadline, timeout)
        pending += chunk
        lines = pending.splitlines(keepends=True)
        if lines and not lines[-1].endswith("\n"):
            pending = lines.pop()
        else:
            pending = ""
        yield from lines
    if pending:
        yield pending


def _iter_lines(
    stream: Any,
    encoding: str,
    deadline: Optional[float] = None,
    timeout: Optional[float] = None,
) -> Iterator[str]:
    """Yield text lines from an httpx response or a binary/text line source."""
    if isinstance(stream, httpx.Response):
        stream.encoding = encoding
        yield from _iter_response_lines(stream, deadline, timeout)
        return

    for line in stream:
        _check_deadline(deadline, timeout)
        yield line.decode(encoding) if isinstance(line, bytes) else line


def read_hourly_data(
    stream: Any,
    encoding: str = "utf-8",
    deadline: Optional[float] = None,
    timeout: Optional[float] = None,
) -> HourlyDataset:
    """
    Read an AZMet raw hourly CSV stream into a dataset.

    Rows are decoded in order and each record is appended as soon as it is
    decoded. The first row that fails to decode aborts the read; no partial
    dataset is ever returned. Blank lines are skipped. The stream is closed
    on every exit path.

    Args:
        stream: An open ``httpx.Response``, binary file object, or any
            closeable iterable of byte or text lines
        encoding: Encoding used to decode the body, applied to byte lines
            and to ``httpx.Response`` bodies alike
        deadline: Optional ``time.monotonic()`` value after which the read
            is abandoned, bounding the whole transfer
        timeout: Timeout in seconds reported when the deadline passes

    Returns:
        HourlyDataset with one record per data row

    Raises:
        AZMetDataError: If a row has the wrong shape, a field does not parse,
            or the CSV itself is malformed
        AZMetTimezoneError: If the reporting timezone is unavailable
        AZMetConnectionError: If the transfer fails while streaming or
            runs past the deadline
    """
    dataset = HourlyDataset()

    with closing(stream):
        reader = csv.reader(_iter_lines(stream, encoding, deadline, timeout))
        try:
            for row in reader:
                if not row:
                    continue
                try:
                    record = decode_row(row, row_number=reader.line_num)
                except AZMetDataError as e:
                    logger.debug(f"Aborting hourly data read: {e}")
                    raise
                dataset.append(record)
        except csv.Error as e:
            raise AZMetDataError(f"Malformed CSV: {e}", reader.line_num) from e
        except UnicodeDecodeError as e:
            raise AZMetDataError(
                f"Unable to decode data as {encoding}: {e}", reader.line_num + 1
            ) from e
        except httpx.TimeoutException as e:
            raise AZMetConnectionError("Timeout while reading hourly data") from e
        except httpx.HTTPError as e:
            raise AZMetConnectionError(f"Network error while reading: {e}") from e

    logger.debug(f"Parsed {len(dataset)} hourly records")
    return dataset
