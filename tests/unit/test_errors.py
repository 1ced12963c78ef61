# =============================================================================
# Unit Tests: Error Taxonomy
# =============================================================================

from geoconv.errors import ConversionError, FormatError, MalformedFieldError


def test_errors_share_a_base_class():
    assert issubclass(FormatError, ConversionError)
    assert issubclass(MalformedFieldError, ConversionError)
    assert not issubclass(FormatError, MalformedFieldError)


def test_format_error_includes_line_number():
    error = FormatError("expected 3 columns, got 2", line_number=7)

    assert error.line_number == 7
    assert str(error) == "line 7: expected 3 columns, got 2"


def test_format_error_without_line_number():
    error = FormatError("bad input")

    assert error.line_number is None
    assert str(error) == "bad input"


def test_malformed_field_error_names_field():
    error = MalformedFieldError("geometry", "invalid JSON")

    assert error.field == "geometry"
    assert str(error) == "geometry: invalid JSON"
