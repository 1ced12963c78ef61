# =============================================================================
# Transformations Library
# =============================================================================
# Record mappers and the recipe registry that pairs them with readers and
# writers.
# =============================================================================

"""
Transformations library for the converters.

This library provides:
- RecordMapper: Base class for all record mappers
- Mappers: FeatureFromCsvMapper, FeatureWithNumericIdMapper, WktRowFromFeatureMapper
- RecipeRegistry: Name-based recipe lookup
"""

from .base import RecordMapper
from .mappers import (
    FeatureFromCsvMapper,
    FeatureWithNumericIdMapper,
    WktRowFromFeatureMapper,
    csv_quote_escape,
)
from .registry import ConversionRecipe, RecipeRegistry

__all__ = [
    "RecordMapper",
    "FeatureFromCsvMapper",
    "FeatureWithNumericIdMapper",
    "WktRowFromFeatureMapper",
    "csv_quote_escape",
    "ConversionRecipe",
    "RecipeRegistry",
]
