"""Conversion orchestration for the affiliations vocabulary.

This module coordinates source loading, record mapping, and YAML
writing for one single-pass conversion call.
"""

from __future__ import annotations

from pathlib import Path

from core.config import VocabConfig
from core.errors import ConversionError
from core.logging_config import configure_logging, get_logger
from core.types import ConversionSummary, RawRecord, TargetRecord
from ingest.source_reader import read_source_records
from store.yaml_writer import write_target_records
from transforms.affiliation_mapping import map_affiliation_records

_LOGGER = get_logger(__name__)


class ConversionRunner:
    """Runner for one affiliations JSON to YAML conversion."""

    def __init__(
        self,
        source_path: str | Path,
        destination_path: str | Path,
        config: VocabConfig,
    ) -> None:
        self._source_path = Path(source_path).expanduser()
        self._destination_path = Path(destination_path).expanduser()
        self._config = config

    def run(self) -> ConversionSummary:
        """Execute the pipeline and return its summary."""
        raw_records = self._load_source_records()
        target_records = map_affiliation_records(raw_records)
        written_path = self._write_target_records(target_records)
        summary = ConversionSummary(
            source_path=self._source_path,
            destination_path=written_path,
            input_count=len(raw_records),
            output_count=len(target_records),
        )
        _log_conversion_completion(summary)
        return summary

    def _load_source_records(self) -> list[RawRecord]:
        raw_records = read_source_records(self._source_path, self._config.source_encoding)
        _LOGGER.debug(
            "source_loaded",
            source_path=str(self._source_path),
            record_count=len(raw_records),
        )
        return raw_records

    def _write_target_records(self, target_records: list[TargetRecord]) -> Path:
        written_path = write_target_records(target_records, self._destination_path)
        _LOGGER.debug(
            "records_written",
            destination_path=str(written_path),
            record_count=len(target_records),
        )
        return written_path


def convert(
    source_path: str | Path,
    destination_path: str | Path,
    config: VocabConfig | None = None,
) -> ConversionSummary:
    """Convert an affiliations JSON file into a BOM-prefixed YAML file.

    Args:
        source_path: Source JSON array file.
        destination_path: Destination YAML file.
        config: Optional runtime configuration, defaults to environment.

    Returns:
        Summary with resolved paths and record counts.

    Raises:
        SourceReadError: If the source cannot be read or parsed.
        SourceSchemaError: If the source does not match the record shape.
        DestinationWriteError: If the destination cannot be written.
    """
    runtime_config = config or VocabConfig.from_env()
    configure_logging(runtime_config.log_level)
    runner = ConversionRunner(source_path, destination_path, runtime_config)
    try:
        return runner.run()
    except ConversionError as error:
        _LOGGER.error(
            "conversion_failed",
            source_path=str(source_path),
            destination_path=str(destination_path),
            error_type=type(error).__name__,
            message=str(error),
        )
        raise


def _log_conversion_completion(summary: ConversionSummary) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "conversion_completed",
        source_path=str(summary.source_path),
        destination_path=str(summary.destination_path),
        input_count=summary.input_count,
        output_count=summary.output_count,
    )
