# =============================================================================
# Command Line Entry Points
# =============================================================================
# One console command per recipe. Each takes exactly one positional argument,
# the input file; the output path comes from ConverterSettings.
# =============================================================================

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from geoconv.models import ConverterSettings
from geoconv.pipeline import run_conversion
from geoconv.transformations import RecipeRegistry

__all__ = ["main", "csv_to_ndgeojson", "csv_to_ndgeojson_numeric_id", "ndgeojson_to_csv"]

_DESCRIPTIONS = {
    RecipeRegistry.CSV_TO_NDGEOJSON: "Convert building CSV (id, geometry, attributes) to NDGeoJSON",
    RecipeRegistry.CSV_TO_NDGEOJSON_NUMERIC_ID: (
        "Convert building CSV to NDGeoJSON, keeping the building sequence number as a numeric id"
    ),
    RecipeRegistry.NDGEOJSON_TO_CSV: "Convert NDGeoJSON buildings to CSV rows of (id, WKT, properties)",
}


def build_parser(recipe_name: str) -> argparse.ArgumentParser:
    """Build the argument parser for one recipe's command."""
    parser = argparse.ArgumentParser(
        prog=recipe_name.replace("_", "-"),
        description=_DESCRIPTIONS[recipe_name],
    )
    parser.add_argument("input", type=Path, help="Input file path")
    return parser


def main(recipe_name: str, argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, configure logging and run one conversion."""
    args = build_parser(recipe_name).parse_args(argv)

    settings = ConverterSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
    )

    run_conversion(recipe_name, args.input, settings=settings)
    return 0


def csv_to_ndgeojson(argv: Optional[Sequence[str]] = None) -> int:
    return main(RecipeRegistry.CSV_TO_NDGEOJSON, argv)


def csv_to_ndgeojson_numeric_id(argv: Optional[Sequence[str]] = None) -> int:
    return main(RecipeRegistry.CSV_TO_NDGEOJSON_NUMERIC_ID, argv)


def ndgeojson_to_csv(argv: Optional[Sequence[str]] = None) -> int:
    return main(RecipeRegistry.NDGEOJSON_TO_CSV, argv)
