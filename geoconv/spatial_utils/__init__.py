# =============================================================================
# Spatial Utils Library
# =============================================================================
# Geometry encoding and building key helpers.
# =============================================================================

"""
Spatial utilities for the converters.

This library provides:
- geojson_to_wkt: GeoJSON geometry -> WKT via shapely
- BuildingKey: Composite building key parsing
"""

from .building_id import BuildingKey
from .wkt import SUPPORTED_GEOMETRY_TYPES, geojson_to_wkt

__all__ = [
    "BuildingKey",
    "SUPPORTED_GEOMETRY_TYPES",
    "geojson_to_wkt",
]
