# =============================================================================
# Data Models Library
# =============================================================================
# Pydantic record schemas and settings for the converters.
# =============================================================================

"""
Data models for the converters.

This library provides:
- Record schemas: CsvFeatureRow, NdGeoJsonRecord, GeoJsonFeature, WktCsvRow
- Configuration: ConverterSettings
"""

# Record schemas
from .records import (
    CsvFeatureRow,
    NdGeoJsonRecord,
    GeoJsonFeature,
    WktCsvRow,
    parse_record,
)

# Configuration models
from .config import (
    ConverterSettings,
    DEFAULT_BUILDING_ID_KEY,
)

__all__ = [
    # Record schemas
    "CsvFeatureRow",
    "NdGeoJsonRecord",
    "GeoJsonFeature",
    "WktCsvRow",
    "parse_record",
    # Configuration models
    "ConverterSettings",
    "DEFAULT_BUILDING_ID_KEY",
]
