"""
Shared pytest fixtures for converter tests.

Provides sample building records and helpers that write them to tmp_path.
"""

import csv
import json
from pathlib import Path

import pytest

from geoconv.models import ConverterSettings


# =============================================================================
# Sample Records
# =============================================================================

@pytest.fixture
def point_geometry():
    """GeoJSON Point geometry."""
    return {"type": "Point", "coordinates": [1, 2]}


@pytest.fixture
def square_geometry():
    """GeoJSON Polygon geometry (closed unit square)."""
    return {
        "type": "Polygon",
        "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
    }


@pytest.fixture
def building_rows(square_geometry):
    """CSV building rows as (id, geometry, attributes) value dicts."""
    return [
        {
            "id": "13101-1-000123",
            "geometry": json.dumps(square_geometry),
            "attributes": json.dumps(
                {"建物ID": "13101-bldg-123", "name": "丸の内ビル", "measuredHeight": 42.5},
                ensure_ascii=False,
            ),
        },
        {
            "id": "13101-1-000124",
            "geometry": json.dumps({"type": "Point", "coordinates": [139.76, 35.68]}),
            "attributes": json.dumps({"建物ID": "13101-bldg-124", "name": "Tower \"B\""}),
        },
        {
            "id": "13101-2-000007",
            "geometry": json.dumps(
                {"type": "LineString", "coordinates": [[0, 0], [2, 3], [4, 1]]}
            ),
            "attributes": json.dumps({"建物ID": "13101-bldg-7", "floors": 3}),
        },
    ]


# =============================================================================
# File Writers
# =============================================================================

def write_csv(path: Path, rows: list[dict], header=("id", "geometry", "attributes")) -> Path:
    """Write rows as CSV with a header row (fields quoted as needed)."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in rows:
            writer.writerow([row[name] for name in header])
    return path


def write_ndjson(path: Path, documents: list) -> Path:
    """Write one JSON document per line."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        for document in documents:
            f.write(json.dumps(document, ensure_ascii=False) + "\n")
    return path


@pytest.fixture
def buildings_csv(tmp_path, building_rows):
    """Path to a CSV file holding building_rows."""
    return write_csv(tmp_path / "buildings.csv", building_rows)


@pytest.fixture
def settings(tmp_path):
    """Settings with outputs redirected to tmp_path."""
    return ConverterSettings(
        geojson_output=str(tmp_path / "output_from_csv.ndgeojson"),
        csv_output=str(tmp_path / "output.csv"),
    )


@pytest.fixture
def make_csv():
    """Factory fixture: write_csv(path, rows, header=...)."""
    return write_csv


@pytest.fixture
def make_ndjson():
    """Factory fixture: write_ndjson(path, documents)."""
    return write_ndjson
