# =============================================================================
# Sink Writers
# =============================================================================
# One-line-per-record serializers for the two output formats.
# =============================================================================

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO, Union

from geoconv.models import GeoJsonFeature, WktCsvRow

__all__ = ["RecordWriter", "NdGeoJsonWriter", "WktCsvWriter"]

logger = logging.getLogger(__name__)


class RecordWriter(ABC):
    """
    Base class for sink writers.

    The writer owns its text handle: closing the writer closes the handle.
    Each record becomes exactly one line terminated by "\\n".

    Attributes:
        records_written: Number of records written so far
    """

    def __init__(self, stream: TextIO, flush_each_record: bool = True):
        self.stream = stream
        self.flush_each_record = flush_each_record
        self.records_written = 0

    @classmethod
    def to_path(
        cls,
        path: Union[str, Path],
        encoding: str = "utf-8",
        flush_each_record: bool = True,
    ) -> "RecordWriter":
        """Open (truncating) a file for writing and wrap it in a writer."""
        stream = open(path, "w", encoding=encoding, newline="")
        return cls(stream, flush_each_record=flush_each_record)

    @abstractmethod
    def format(self, record: Any) -> str:
        """Serialize one record to a single line without the newline."""
        pass

    def write(self, record: Any) -> None:
        self.stream.write(self.format(record) + "\n")
        if self.flush_each_record:
            self.stream.flush()
        self.records_written += 1

    def close(self) -> None:
        if not self.stream.closed:
            self.stream.close()
            logger.debug(f"{type(self).__name__} closed after {self.records_written} records")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class NdGeoJsonWriter(RecordWriter):
    """Writes one compact GeoJSON Feature per line."""

    def format(self, record: GeoJsonFeature) -> str:
        return record.to_json_line()


class WktCsvWriter(RecordWriter):
    """
    Writes rows of exactly three double-quoted fields: id, WKT, properties.

    Fields must already have their embedded quotes doubled; nothing else is
    escaped.
    """

    def format(self, record: WktCsvRow) -> str:
        return f'"{record.id}","{record.wkt}","{record.properties_json}"'
