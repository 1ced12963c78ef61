# =============================================================================
# Building Key Parser
# =============================================================================
# Splits composite building keys of the form
#   <prefecture-town code>-<building category>-<building sequence number>
# e.g. "13101-1-000123" -> sequence number 123.
# =============================================================================

import re

from pydantic import BaseModel, Field

from geoconv.errors import MalformedFieldError

__all__ = ["BuildingKey"]

_SEQUENCE_PATTERN = re.compile(r"[+-]?[0-9]+")


class BuildingKey(BaseModel):
    """
    Parsed composite building key.

    The first two components are kept as text and validated by position only.

    Example:
        >>> key = BuildingKey.from_composite("13101-1-000123")
        >>> key.sequence_number
        123
        >>> key.area_code
        '13101'
    """

    area_code: str = Field(..., description="Prefecture-town code (first component)")
    category: str = Field(..., description="Building category (second component)")
    sequence_number: int = Field(..., description="Building sequence number (third component)")

    @classmethod
    def from_composite(cls, value: str, field: str = "id") -> "BuildingKey":
        """
        Parse a hyphen-separated composite key.

        Args:
            value: Composite key string
            field: Field name reported in errors

        Returns:
            Parsed BuildingKey

        Raises:
            MalformedFieldError: If the key does not have exactly three
                components or the third is not a base-10 integer
        """
        parts = value.split("-")
        if len(parts) != 3:
            raise MalformedFieldError(
                field,
                f"expected 3 hyphen-separated components, got {len(parts)} in {value!r}",
            )

        area_code, category, sequence = parts
        if not _SEQUENCE_PATTERN.fullmatch(sequence):
            raise MalformedFieldError(
                field, f"building sequence number {sequence!r} is not a base-10 integer"
            )

        return cls(area_code=area_code, category=category, sequence_number=int(sequence, 10))
