"""
Source readers and sink writers.

This library provides:
- CsvRecordReader / NdJsonRecordReader: lazy raw record sources
- NdGeoJsonWriter / WktCsvWriter: one-line-per-record sinks
"""

from .readers import (
    RecordReader,
    CsvRecordReader,
    NdJsonRecordReader,
    iter_csv_records,
    iter_ndjson_records,
    loads_json,
)
from .writers import RecordWriter, NdGeoJsonWriter, WktCsvWriter

__all__ = [
    "RecordReader",
    "CsvRecordReader",
    "NdJsonRecordReader",
    "iter_csv_records",
    "iter_ndjson_records",
    "loads_json",
    "RecordWriter",
    "NdGeoJsonWriter",
    "WktCsvWriter",
]
