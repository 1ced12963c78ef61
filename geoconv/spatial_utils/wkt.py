# =============================================================================
# GeoJSON -> WKT Conversion
# =============================================================================
# Thin wrapper around shapely for converting GeoJSON geometry objects to
# Well-Known Text.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any

from shapely.errors import ShapelyError
from shapely.geometry import shape

from geoconv.errors import MalformedFieldError

__all__ = ["SUPPORTED_GEOMETRY_TYPES", "geojson_to_wkt"]

logger = logging.getLogger(__name__)

SUPPORTED_GEOMETRY_TYPES = frozenset(
    {
        "Point",
        "LineString",
        "Polygon",
        "MultiPoint",
        "MultiLineString",
        "MultiPolygon",
        "GeometryCollection",
    }
)


def geojson_to_wkt(geometry: Mapping[str, Any], field: str = "geometry") -> str:
    """
    Convert a GeoJSON geometry object to WKT.

    Numbers are written in shortest form, so integral coordinates lose their
    decimal point (e.g. "POINT (1 2)"). Z values are kept ("POINT Z (1 2 3)").

    Args:
        geometry: GeoJSON geometry object
        field: Field name reported in errors

    Returns:
        WKT string

    Raises:
        MalformedFieldError: If the geometry type is unsupported or the
            coordinates do not form a valid geometry of that type

    Examples:
        >>> geojson_to_wkt({"type": "Point", "coordinates": [1, 2]})
        'POINT (1 2)'
    """
    geom_type = _check_geometry(geometry, field)

    try:
        geom = shape(geometry)
    except (ShapelyError, ValueError, TypeError, IndexError, KeyError, AttributeError) as exc:
        raise MalformedFieldError(field, f"invalid {geom_type}: {exc}") from exc

    logger.debug(f"Converted {geom_type} with bounds {geom.bounds}")
    return geom.wkt


def _check_geometry(geometry: Any, field: str) -> str:
    if not isinstance(geometry, Mapping):
        raise MalformedFieldError(
            field, f"expected a geometry object, got {type(geometry).__name__}"
        )

    geom_type = geometry.get("type")
    if not isinstance(geom_type, str) or geom_type not in SUPPORTED_GEOMETRY_TYPES:
        raise MalformedFieldError(field, f"unsupported geometry type {geom_type!r}")

    member = "geometries" if geom_type == "GeometryCollection" else "coordinates"
    if member not in geometry:
        raise MalformedFieldError(field, f"{geom_type} has no '{member}' member")
    # shapely turns a null or scalar member into an empty geometry
    if not isinstance(geometry[member], list):
        raise MalformedFieldError(field, f"{geom_type} '{member}' must be an array")

    if geom_type == "GeometryCollection":
        for child in geometry[member]:
            _check_geometry(child, field)
    return geom_type
