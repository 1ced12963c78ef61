# =============================================================================
# Unit Tests: Recipe Registry
# =============================================================================

import pytest

from geoconv.models import ConverterSettings
from geoconv.streams import CsvRecordReader, NdGeoJsonWriter, NdJsonRecordReader, WktCsvWriter
from geoconv.transformations import (
    FeatureFromCsvMapper,
    FeatureWithNumericIdMapper,
    RecipeRegistry,
    WktRowFromFeatureMapper,
)


# =============================================================================
# Test: get_recipe
# =============================================================================

def test_registry_names():
    """Test that the three conversions are registered."""
    assert RecipeRegistry.names() == [
        "csv_to_ndgeojson",
        "csv_to_ndgeojson_numeric_id",
        "ndgeojson_to_csv",
    ]


def test_csv_to_ndgeojson_recipe(settings):
    """Test the verbatim-id CSV -> NDGeoJSON recipe."""
    recipe = RecipeRegistry.get_recipe("csv_to_ndgeojson", settings)

    assert recipe.name == "csv_to_ndgeojson"
    assert recipe.reader_cls is CsvRecordReader
    assert type(recipe.mapper) is FeatureFromCsvMapper
    assert recipe.writer_cls is NdGeoJsonWriter
    assert recipe.default_output == settings.geojson_output


def test_csv_to_ndgeojson_numeric_id_recipe(settings):
    """Test the numeric-id CSV -> NDGeoJSON recipe."""
    recipe = RecipeRegistry.get_recipe("csv_to_ndgeojson_numeric_id", settings)

    assert recipe.reader_cls is CsvRecordReader
    assert isinstance(recipe.mapper, FeatureWithNumericIdMapper)
    assert recipe.writer_cls is NdGeoJsonWriter
    assert recipe.default_output == settings.geojson_output


def test_ndgeojson_to_csv_recipe(settings):
    """Test the NDGeoJSON -> CSV/WKT recipe."""
    recipe = RecipeRegistry.get_recipe("ndgeojson_to_csv", settings)

    assert recipe.reader_cls is NdJsonRecordReader
    assert isinstance(recipe.mapper, WktRowFromFeatureMapper)
    assert recipe.mapper.building_id_key == "建物ID"
    assert recipe.writer_cls is WktCsvWriter
    assert recipe.default_output == settings.csv_output


def test_building_id_key_comes_from_settings():
    """Test that the mapper is configured from settings."""
    settings = ConverterSettings(building_id_key="building_id")
    recipe = RecipeRegistry.get_recipe("ndgeojson_to_csv", settings)

    assert recipe.mapper.building_id_key == "building_id"


def test_registry_returns_new_mapper_instances(settings):
    """Test that recipes do not share mapper instances."""
    first = RecipeRegistry.get_recipe("csv_to_ndgeojson", settings)
    second = RecipeRegistry.get_recipe("csv_to_ndgeojson", settings)

    assert first.mapper is not second.mapper
    assert type(first.mapper) == type(second.mapper)


def test_unknown_recipe_raises_value_error(settings):
    """Test that an unknown name lists the known recipes."""
    with pytest.raises(ValueError, match="csv_to_ndgeojson"):
        RecipeRegistry.get_recipe("shp_to_csv", settings)
