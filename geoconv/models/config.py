# =============================================================================
# Configuration Models Module
# =============================================================================
# Pydantic Settings model for the converters. Every value has a default so
# the CLI runs with no environment at all.
# =============================================================================

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ConverterSettings", "DEFAULT_BUILDING_ID_KEY"]

# Property key holding the building ID in PLATEAU-derived data ("building ID")
DEFAULT_BUILDING_ID_KEY = "建物ID"


class ConverterSettings(BaseSettings):
    """
    Configuration for the CSV <-> NDGeoJSON converters.

    Maps environment variables with prefix "GEOCONV_":
    - GEOCONV_GEOJSON_OUTPUT → geojson_output
    - GEOCONV_CSV_OUTPUT → csv_output
    - GEOCONV_BUILDING_ID_KEY → building_id_key
    - GEOCONV_ENCODING → encoding
    - GEOCONV_FLUSH_EACH_RECORD → flush_each_record
    - GEOCONV_LOG_LEVEL → log_level

    Attributes:
        geojson_output: Output path for the CSV → NDGeoJSON converters
        csv_output: Output path for the NDGeoJSON → CSV converter
        building_id_key: Property key dropped from properties and used as CSV id
        encoding: Text encoding for input and output files
        flush_each_record: Flush the output handle after every record
        log_level: Logging level name for the CLI
    """

    geojson_output: str = Field(
        "output_from_csv.ndgeojson",
        validation_alias="GEOCONV_GEOJSON_OUTPUT",
        description="Output path for CSV → NDGeoJSON",
    )
    csv_output: str = Field(
        "output.csv",
        validation_alias="GEOCONV_CSV_OUTPUT",
        description="Output path for NDGeoJSON → CSV",
    )
    building_id_key: str = Field(
        DEFAULT_BUILDING_ID_KEY,
        validation_alias="GEOCONV_BUILDING_ID_KEY",
        description="Property key holding the building ID",
    )
    encoding: str = Field("utf-8", validation_alias="GEOCONV_ENCODING", description="File text encoding")
    flush_each_record: bool = Field(
        True,
        validation_alias="GEOCONV_FLUSH_EACH_RECORD",
        description="Flush output after every record",
    )
    log_level: str = Field("INFO", validation_alias="GEOCONV_LOG_LEVEL", description="Logging level name")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case standard logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("building_id_key")
    @classmethod
    def validate_building_id_key(cls, v: str) -> str:
        if not v:
            raise ValueError("building_id_key cannot be empty")
        return v
