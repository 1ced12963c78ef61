# =============================================================================
# Record Mappers
# =============================================================================
# Concrete mappers for the three conversions:
# - FeatureFromCsvMapper: CSV row -> GeoJSON Feature, id kept verbatim
# - FeatureWithNumericIdMapper: CSV row -> GeoJSON Feature, numeric id
# - WktRowFromFeatureMapper: GeoJSON Feature -> (id, WKT, properties) row
# =============================================================================

import json
import logging
from typing import Any, Dict, Union

from geoconv.errors import MalformedFieldError
from geoconv.models import (
    DEFAULT_BUILDING_ID_KEY,
    CsvFeatureRow,
    GeoJsonFeature,
    NdGeoJsonRecord,
    WktCsvRow,
    parse_record,
)
from geoconv.spatial_utils import BuildingKey, geojson_to_wkt
from geoconv.streams import loads_json

from .base import RecordMapper

__all__ = [
    "FeatureFromCsvMapper",
    "FeatureWithNumericIdMapper",
    "WktRowFromFeatureMapper",
    "csv_quote_escape",
]

logger = logging.getLogger(__name__)


def _parse_json_object(text: str, field: str) -> Dict[str, Any]:
    """
    Decode an embedded JSON field that must hold an object.

    Raises:
        MalformedFieldError: If the text is not JSON or not an object
    """
    try:
        value = loads_json(text)
    except json.JSONDecodeError as exc:
        raise MalformedFieldError(field, f"invalid JSON: {exc.msg}") from exc
    except ValueError as exc:
        raise MalformedFieldError(field, f"invalid JSON: {exc}") from exc

    if not isinstance(value, dict):
        raise MalformedFieldError(
            field, f"expected a JSON object, got {type(value).__name__}"
        )
    return value


def csv_quote_escape(text: str) -> str:
    """Double every embedded double quote for use inside a quoted CSV field."""
    return text.replace('"', '""')


class FeatureFromCsvMapper(RecordMapper):
    """
    Map a CSV row to a GeoJSON Feature.

    The `geometry` and `attributes` columns are decoded from JSON text and the
    `id` column is used as the Feature id unchanged.
    """

    def feature_id(self, row: CsvFeatureRow) -> Union[str, int]:
        return row.id

    def map_record(self, raw: Any) -> GeoJsonFeature:
        row = parse_record(CsvFeatureRow, raw)
        feature = GeoJsonFeature(
            geometry=_parse_json_object(row.geometry, "geometry"),
            properties=_parse_json_object(row.attributes, "attributes"),
            id=self.feature_id(row),
        )
        logger.debug(f"Mapped CSV row to feature {feature.id!r}")
        return feature


class FeatureWithNumericIdMapper(FeatureFromCsvMapper):
    """
    Map a CSV row to a GeoJSON Feature with an integer id.

    The `id` column must be a composite building key such as "13101-1-000123";
    only the building sequence number (123) is kept.
    """

    def feature_id(self, row: CsvFeatureRow) -> int:
        return BuildingKey.from_composite(row.id, field="id").sequence_number


class WktRowFromFeatureMapper(RecordMapper):
    """
    Map a GeoJSON Feature to a three-field CSV row.

    The building ID property becomes the row id and is dropped from the
    serialized properties. The geometry is written as WKT.
    """

    def __init__(self, building_id_key: str = DEFAULT_BUILDING_ID_KEY):
        """
        Initialize the mapper.

        Args:
            building_id_key: Property key holding the building ID (default: "建物ID")
        """
        self.building_id_key = building_id_key

    def map_record(self, raw: Any) -> WktCsvRow:
        record = parse_record(NdGeoJsonRecord, raw)

        properties = dict(record.properties)
        building_id = properties.pop(self.building_id_key, None)
        if building_id is None:
            raise MalformedFieldError(
                f"properties.{self.building_id_key}", "building ID is missing or null"
            )

        row_id = _stringify(building_id, f"properties.{self.building_id_key}")
        wkt = geojson_to_wkt(record.geometry)
        properties_json = _stringify(properties, "properties")
        logger.debug(f"Mapped feature {row_id!r} to a WKT row")

        return WktCsvRow(
            id=csv_quote_escape(row_id),
            wkt=csv_quote_escape(wkt),
            properties_json=csv_quote_escape(properties_json),
        )


def _stringify(value: Any, field: str) -> str:
    # Non-strings use their compact JSON text: 42 -> "42", True -> "true"
    if isinstance(value, str):
        return value
    try:
        return json.dumps(
            value, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        )
    except ValueError as exc:
        raise MalformedFieldError(field, str(exc)) from exc
