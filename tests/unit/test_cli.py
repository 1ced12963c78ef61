# =============================================================================
# Unit Tests: Command Line Entry Points
# =============================================================================

import pytest

from geoconv import cli


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each CLI test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GEOCONV_GEOJSON_OUTPUT", raising=False)
    monkeypatch.delenv("GEOCONV_CSV_OUTPUT", raising=False)
    return tmp_path


def test_csv_to_ndgeojson_writes_conventional_output(workdir, buildings_csv):
    """Test that the command writes output_from_csv.ndgeojson in the cwd."""
    assert cli.csv_to_ndgeojson([str(buildings_csv)]) == 0

    lines = (workdir / "output_from_csv.ndgeojson").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3


def test_csv_to_ndgeojson_numeric_id(workdir, buildings_csv):
    """Test the numeric-id command."""
    assert cli.csv_to_ndgeojson_numeric_id([str(buildings_csv)]) == 0
    assert '"id":123}' in (workdir / "output_from_csv.ndgeojson").read_text(encoding="utf-8")


def test_ndgeojson_to_csv_writes_conventional_output(workdir, make_ndjson):
    """Test that the reverse command writes output.csv in the cwd."""
    source = make_ndjson(
        workdir / "in.ndgeojson",
        [{"properties": {"建物ID": "42", "name": "X"}, "geometry": {"type": "Point", "coordinates": [1, 2]}}],
    )

    assert cli.ndgeojson_to_csv([str(source)]) == 0
    assert (workdir / "output.csv").read_text(encoding="utf-8") == '"42","POINT (1 2)","{""name"":""X""}"\n'


def test_output_path_from_environment(workdir, buildings_csv, monkeypatch):
    """Test that GEOCONV_GEOJSON_OUTPUT redirects the output."""
    monkeypatch.setenv("GEOCONV_GEOJSON_OUTPUT", str(workdir / "custom.ndgeojson"))

    cli.csv_to_ndgeojson([str(buildings_csv)])

    assert (workdir / "custom.ndgeojson").exists()
    assert not (workdir / "output_from_csv.ndgeojson").exists()


def test_input_argument_is_required(workdir):
    """Test that running without an input path exits with usage error."""
    with pytest.raises(SystemExit) as exc_info:
        cli.csv_to_ndgeojson([])

    assert exc_info.value.code == 2


def test_extra_arguments_are_rejected(workdir, buildings_csv):
    """Test that exactly one positional argument is accepted."""
    with pytest.raises(SystemExit):
        cli.ndgeojson_to_csv([str(buildings_csv), "extra"])


def test_errors_propagate(workdir):
    """Test that failures are not swallowed by the command."""
    with pytest.raises(FileNotFoundError):
        cli.csv_to_ndgeojson([str(workdir / "missing.csv")])
