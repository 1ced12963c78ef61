# =============================================================================
# Transcode Pipeline
# =============================================================================
# Sequential reader -> mapper -> writer loop. One record is read, mapped and
# written before the next one is read.
# =============================================================================

"""
Record-at-a-time transcoding pipeline.

Errors are never caught here: the first FormatError or MalformedFieldError
aborts the run. The output handle is still closed, so every record written
before the failure stays in the output file.
"""

import logging
from contextlib import closing
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from geoconv.models import ConverterSettings
from geoconv.streams import RecordReader, RecordWriter
from geoconv.transformations import ConversionRecipe, RecipeRegistry

__all__ = ["PipelineContext", "PipelineResult", "TranscodePipeline", "run_conversion"]

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of one conversion run."""
    recipe: str
    input_path: str
    output_path: str
    records_read: int = 0
    records_written: int = 0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        """Calculate duration in seconds."""
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None


class PipelineContext:
    """
    Per-run state: the recipe, the source reader and the open sink writer.

    Entering the context checks the input exists and opens (truncates) the
    output file; leaving it closes the output file whether or not the run
    succeeded.

    Example:
        >>> recipe = RecipeRegistry.get_recipe("csv_to_ndgeojson")
        >>> with PipelineContext(recipe, "buildings.csv", "out.ndgeojson") as context:
        ...     result = TranscodePipeline(context).run()
    """

    def __init__(
        self,
        recipe: ConversionRecipe,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        settings: Optional[ConverterSettings] = None,
    ):
        self.recipe = recipe
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.settings = settings or ConverterSettings()
        self.reader: Optional[RecordReader] = None
        self.writer: Optional[RecordWriter] = None

    def __enter__(self) -> "PipelineContext":
        if not self.input_path.is_file():
            raise FileNotFoundError(f"Input not found: {self.input_path.resolve()}")

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.reader = self.recipe.reader_cls(self.input_path, encoding=self.settings.encoding)
        self.writer = self.recipe.writer_cls.to_path(
            self.output_path,
            encoding=self.settings.encoding,
            flush_each_record=self.settings.flush_each_record,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.writer is not None:
            self.writer.close()
        if exc_type is not None:
            written = self.writer.records_written if self.writer else 0
            logger.error(f"{self.recipe.name} aborted after {written} records: {exc_val}")


class TranscodePipeline:
    """Runs one recipe over an entered PipelineContext."""

    def __init__(self, context: PipelineContext):
        if context.reader is None or context.writer is None:
            raise ValueError("PipelineContext must be entered before running the pipeline")
        self.context = context

    def run(self) -> PipelineResult:
        """
        Stream every record from reader through mapper to writer.

        Returns:
            PipelineResult with record counts and timing

        Raises:
            FormatError: If the input is structurally invalid
            MalformedFieldError: If a record has an invalid field
        """
        context = self.context
        mapper = context.recipe.mapper
        writer = context.writer

        result = PipelineResult(
            recipe=context.recipe.name,
            input_path=str(context.input_path),
            output_path=str(context.output_path),
            started_at=datetime.now(timezone.utc),
        )
        logger.info(f"{result.recipe}: {result.input_path} -> {result.output_path}")

        with closing(iter(context.reader)) as records:
            for raw in records:
                writer.write(mapper.map_record(raw))

        result.records_read = context.reader.records_read
        result.records_written = writer.records_written
        result.completed_at = datetime.now(timezone.utc)

        logger.info(
            f"{result.recipe}: wrote {result.records_written} records "
            f"in {result.duration_seconds:.2f}s"
        )
        return result


def run_conversion(
    recipe_name: str,
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    settings: Optional[ConverterSettings] = None,
) -> PipelineResult:
    """
    Run a named conversion end to end.

    Args:
        recipe_name: One of RecipeRegistry.names()
        input_path: Input file path
        output_path: Output file path (default: the recipe's configured output)
        settings: Converter settings (default: loaded from the environment)

    Returns:
        PipelineResult for the run
    """
    settings = settings or ConverterSettings()
    recipe = RecipeRegistry.get_recipe(recipe_name, settings)
    output_path = output_path or recipe.default_output

    with PipelineContext(recipe, input_path, output_path, settings) as context:
        return TranscodePipeline(context).run()
