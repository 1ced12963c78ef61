# =============================================================================
# Record Schemas
# =============================================================================
# Typed shapes for the records flowing through a conversion:
# - CsvFeatureRow: one row of the building CSV (raw id / geometry / attributes)
# - NdGeoJsonRecord: one parsed line of newline-delimited GeoJSON
# - GeoJsonFeature: output record for the NDGeoJSON target
# - WktCsvRow: output record for the CSV/WKT target
# =============================================================================

from collections.abc import Mapping
from typing import Any, Literal, Type, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from geoconv.errors import MalformedFieldError

__all__ = [
    "CsvFeatureRow",
    "NdGeoJsonRecord",
    "GeoJsonFeature",
    "WktCsvRow",
    "parse_record",
]

RecordT = TypeVar("RecordT", bound=BaseModel)


# =============================================================================
# Input Records
# =============================================================================

class CsvFeatureRow(BaseModel):
    """
    One data row of the building CSV.

    Columns other than the three below are accepted and ignored.

    Attributes:
        id: Building key as written in the CSV
        geometry: JSON-encoded GeoJSON geometry
        attributes: JSON-encoded properties object
    """

    id: str = Field(..., description="Building key")
    geometry: str = Field(..., description="JSON-encoded GeoJSON geometry")
    attributes: str = Field(..., description="JSON-encoded properties object")

    model_config = {"extra": "ignore"}


class NdGeoJsonRecord(BaseModel):
    """
    One parsed line of newline-delimited GeoJSON.

    Attributes:
        properties: Feature properties, including the building ID key
        geometry: GeoJSON geometry object
    """

    properties: dict[str, Any] = Field(..., description="Feature properties")
    geometry: dict[str, Any] = Field(..., description="GeoJSON geometry object")

    model_config = {"extra": "ignore"}


# =============================================================================
# Output Records
# =============================================================================

class GeoJsonFeature(BaseModel):
    """
    GeoJSON Feature written as one line of NDGeoJSON.

    Field order is the serialization order: type, geometry, properties, id.
    """

    type: Literal["Feature"] = "Feature"
    geometry: dict[str, Any]
    properties: dict[str, Any]
    id: Union[str, int]

    def to_json_line(self) -> str:
        """Serialize to compact JSON without the trailing newline."""
        return self.model_dump_json()


class WktCsvRow(BaseModel):
    """
    Three-field CSV row for the WKT target.

    All fields are already CSV-quote-escaped (embedded quotes doubled).
    """

    id: str
    wkt: str
    properties_json: str


# =============================================================================
# Record Entry Validation
# =============================================================================

def parse_record(model: Type[RecordT], raw: Any) -> RecordT:
    """
    Validate a raw record against its schema.

    Args:
        model: Record schema to validate against
        raw: Raw record produced by a source reader

    Returns:
        Validated record instance

    Raises:
        MalformedFieldError: If the record is not an object, or a required
            field is missing or of the wrong type
    """
    if not isinstance(raw, Mapping):
        raise MalformedFieldError(
            "record", f"expected an object, got {type(raw).__name__}"
        )
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "record"
        raise MalformedFieldError(field, first["msg"]) from exc
