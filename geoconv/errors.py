# =============================================================================
# Conversion Errors
# =============================================================================
# Error taxonomy shared by readers, mappers and writers.
# =============================================================================

"""Exceptions raised while converting a stream of records."""

from typing import Optional

__all__ = ["ConversionError", "FormatError", "MalformedFieldError"]


class ConversionError(Exception):
    """Base class for all conversion failures."""


class FormatError(ConversionError):
    """
    Input stream does not conform to its structural format.

    Raised for ragged CSV rows and lines that are not valid JSON.

    Attributes:
        line_number: 1-based line number of the offending input line, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedFieldError(ConversionError):
    """
    A structurally valid record has a field with invalid content.

    Attributes:
        field: Name of the offending field
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
