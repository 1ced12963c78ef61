# =============================================================================
# geoconv - Streaming building data converters
# =============================================================================
# Line-oriented converters between CSV and newline-delimited GeoJSON.
# See individual sub-packages for detailed documentation.
# =============================================================================

"""
Streaming CSV <-> NDGeoJSON converters for building footprint data.

Sub-packages:
- models: Pydantic record schemas and settings
- spatial_utils: WKT conversion and building key parsing
- streams: Source readers and sink writers
- transformations: Record mappers and the recipe registry
"""

__version__ = "0.1.0"
