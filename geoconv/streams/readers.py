# =============================================================================
# Source Readers
# =============================================================================
# Lazy, record-at-a-time readers for the two supported input formats:
# - CSV with a header row -> dict[str, str] per data row
# - Newline-delimited JSON -> one parsed JSON value per non-blank line
# =============================================================================

import csv
import io
import json
import logging
import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterator, TextIO, Union

from geoconv.errors import FormatError

__all__ = [
    "RecordReader",
    "CsvRecordReader",
    "NdJsonRecordReader",
    "iter_csv_records",
    "iter_ndjson_records",
    "loads_json",
]

logger = logging.getLogger(__name__)

# Building footprints routinely exceed the default 128 KiB field limit
csv.field_size_limit(2**31 - 1)

_BOM = "\ufeff"

Source = Union[str, Path, BinaryIO]


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not a valid JSON value")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def loads_json(text: str) -> Any:
    """
    Decode strict JSON text.

    Unlike json.loads, the non-standard NaN, Infinity and -Infinity tokens
    and numbers that overflow a float are rejected.

    Raises:
        ValueError: If the text is not valid JSON (json.JSONDecodeError for
            syntax errors)
    """
    return json.loads(
        text, parse_constant=_reject_constant, parse_float=_parse_finite_float
    )


def iter_csv_records(text_stream: TextIO) -> Iterator[Dict[str, str]]:
    """
    Yield one field-name -> value mapping per CSV data row.

    The first row is the header. Blank lines are skipped and a leading byte
    order mark on the header is dropped.

    Args:
        text_stream: Text stream opened with newline=""

    Yields:
        Mapping from header field name to field value

    Raises:
        FormatError: If a row's column count differs from the header's, or
            the text is not parseable as CSV
    """
    rows = csv.reader(text_stream)
    header = None

    while True:
        try:
            row = next(rows)
        except StopIteration:
            return
        except csv.Error as exc:
            raise FormatError(str(exc), rows.line_num) from exc

        if not row:
            continue

        if header is None:
            row[0] = row[0].lstrip(_BOM)
            header = row
            logger.debug(f"CSV header: {header}")
            continue

        if len(row) != len(header):
            raise FormatError(
                f"expected {len(header)} columns, got {len(row)}", rows.line_num
            )

        yield dict(zip(header, row))


def iter_ndjson_records(text_stream: TextIO) -> Iterator[Any]:
    """
    Yield one parsed JSON document per non-blank line.

    Raises:
        FormatError: If a line is not valid JSON
    """
    for line_number, line in enumerate(text_stream, 1):
        line = line.strip()
        if line_number == 1:
            line = line.lstrip(_BOM)
        if not line:
            continue

        try:
            document = loads_json(line)
        except json.JSONDecodeError as exc:
            raise FormatError(f"invalid JSON: {exc.msg} (column {exc.colno})", line_number) from exc
        except ValueError as exc:
            raise FormatError(f"invalid JSON: {exc}", line_number) from exc

        yield document


class RecordReader(ABC):
    """
    Base class for source readers.

    A reader wraps a path or a binary stream. Iterating it opens one text
    handle, yields raw records lazily and closes the handle when the records
    are exhausted, when an error is raised, or when the consumer stops early.
    A reader built from a binary stream takes ownership of that stream and can
    only be iterated once; a reader built from a path reopens the file on each
    iteration.

    Attributes:
        records_read: Number of records yielded so far
    """

    def __init__(self, source: Source, encoding: str = "utf-8"):
        self.source = source
        self.encoding = encoding
        self.records_read = 0

    @abstractmethod
    def parse(self, text_stream: TextIO) -> Iterator[Any]:
        """Yield raw records from an open text stream."""
        pass

    def _open(self) -> TextIO:
        if isinstance(self.source, (str, Path)):
            return open(self.source, "r", encoding=self.encoding, newline="")
        return io.TextIOWrapper(self.source, encoding=self.encoding, newline="")

    def __iter__(self) -> Iterator[Any]:
        with self._open() as text_stream:
            for record in self.parse(text_stream):
                self.records_read += 1
                yield record
        logger.debug(f"{type(self).__name__} exhausted after {self.records_read} records")


class CsvRecordReader(RecordReader):
    """Reads CSV with a header row; each data row is a dict[str, str]."""

    def parse(self, text_stream: TextIO) -> Iterator[Dict[str, str]]:
        return iter_csv_records(text_stream)


class NdJsonRecordReader(RecordReader):
    """Reads newline-delimited JSON; each non-blank line is one document."""

    def parse(self, text_stream: TextIO) -> Iterator[Any]:
        return iter_ndjson_records(text_stream)
