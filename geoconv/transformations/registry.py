# =============================================================================
# Recipe Registry
# =============================================================================
# Name-based lookup for complete conversions (reader, mapper, writer).
# =============================================================================

from dataclasses import dataclass
from typing import List, Optional, Type

from geoconv.models import ConverterSettings
from geoconv.streams import (
    CsvRecordReader,
    NdGeoJsonWriter,
    NdJsonRecordReader,
    RecordReader,
    RecordWriter,
    WktCsvWriter,
)

from .base import RecordMapper
from .mappers import (
    FeatureFromCsvMapper,
    FeatureWithNumericIdMapper,
    WktRowFromFeatureMapper,
)

__all__ = ["ConversionRecipe", "RecipeRegistry"]


@dataclass(frozen=True)
class ConversionRecipe:
    """
    A complete conversion: how to read, map and write records.

    Attributes:
        name: Recipe name (e.g., "csv_to_ndgeojson")
        reader_cls: Source reader class
        mapper: Record mapper instance
        writer_cls: Sink writer class
        default_output: Output path used when none is given
    """
    name: str
    reader_cls: Type[RecordReader]
    mapper: RecordMapper
    writer_cls: Type[RecordWriter]
    default_output: str


class RecipeRegistry:
    """
    Registry of conversion recipes by name.

    Recipes are built fresh on each lookup (no shared mapper instances).
    """

    CSV_TO_NDGEOJSON = "csv_to_ndgeojson"
    CSV_TO_NDGEOJSON_NUMERIC_ID = "csv_to_ndgeojson_numeric_id"
    NDGEOJSON_TO_CSV = "ndgeojson_to_csv"

    @classmethod
    def names(cls) -> List[str]:
        """Return the known recipe names."""
        return [cls.CSV_TO_NDGEOJSON, cls.CSV_TO_NDGEOJSON_NUMERIC_ID, cls.NDGEOJSON_TO_CSV]

    @classmethod
    def get_recipe(
        cls, name: str, settings: Optional[ConverterSettings] = None
    ) -> ConversionRecipe:
        """
        Get the conversion recipe for a name.

        Args:
            name: Recipe name, one of RecipeRegistry.names()
            settings: Converter settings (default: loaded from the environment)

        Returns:
            ConversionRecipe with a new mapper instance

        Raises:
            ValueError: If the name is unknown
        """
        settings = settings or ConverterSettings()

        if name == cls.CSV_TO_NDGEOJSON:
            return ConversionRecipe(
                name=name,
                reader_cls=CsvRecordReader,
                mapper=FeatureFromCsvMapper(),
                writer_cls=NdGeoJsonWriter,
                default_output=settings.geojson_output,
            )
        if name == cls.CSV_TO_NDGEOJSON_NUMERIC_ID:
            return ConversionRecipe(
                name=name,
                reader_cls=CsvRecordReader,
                mapper=FeatureWithNumericIdMapper(),
                writer_cls=NdGeoJsonWriter,
                default_output=settings.geojson_output,
            )
        if name == cls.NDGEOJSON_TO_CSV:
            return ConversionRecipe(
                name=name,
                reader_cls=NdJsonRecordReader,
                mapper=WktRowFromFeatureMapper(building_id_key=settings.building_id_key),
                writer_cls=WktCsvWriter,
                default_output=settings.csv_output,
            )

        raise ValueError(
            f"Unknown recipe: {name!r}. Must be one of: {', '.join(cls.names())}"
        )
