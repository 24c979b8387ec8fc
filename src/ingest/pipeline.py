"""Conversion orchestration.

This module sequences validation, joining and carrier formatting, then
writes the label file. Conversion failures are returned as values so
callers can surface the summary and every detail message.
"""

from __future__ import annotations

from core.config import ShipLabelConfig
from core.logging_config import get_logger
from core.types import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    SourceTables,
    TableSources,
    TransformResult,
    TransformSuccess,
)
from ingest.csv_reader import read_source_tables
from store.label_writer import write_label_csv
from transforms.carrier_format import format_records
from transforms.table_join import MERGE_FAILED_MESSAGE, join_tables
from transforms.table_validation import VALIDATION_FAILED_MESSAGE, validate_tables

_LOGGER = get_logger(__name__)


def transform_tables(tables: SourceTables) -> TransformResult:
    """Validate, join and format input tables without any I/O.

    Args:
        tables: Parsed input tables.

    Returns:
        Label records with partial join errors, or a validation/merge failure.
    """
    validation_errors = validate_tables(tables)
    if validation_errors:
        return ConversionFailure(
            kind="validation", error=VALIDATION_FAILED_MESSAGE, errors=validation_errors
        )
    join_result = join_tables(tables)
    if join_result.errors and not join_result.records:
        return ConversionFailure(
            kind="merge", error=MERGE_FAILED_MESSAGE, errors=join_result.errors
        )
    return TransformSuccess(
        records=tuple(format_records(join_result.records)), errors=join_result.errors
    )


def convert_tables(tables: SourceTables, config: ShipLabelConfig) -> ConversionResult:
    """Convert parsed tables and write the label CSV.

    Args:
        tables: Parsed input tables.
        config: Runtime configuration.

    Returns:
        Success with output path and preview rows, or the conversion failure.

    Raises:
        ShipLabelStoreError: If the label file cannot be written.
    """
    outcome = transform_tables(tables)
    if isinstance(outcome, ConversionFailure):
        _LOGGER.warning(
            "conversion_failed",
            kind=outcome.kind,
            error=outcome.error,
            error_count=len(outcome.errors),
        )
        return outcome
    output_path = write_label_csv(outcome.records, config.output_dir)
    _LOGGER.info(
        "conversion_completed",
        order_count=len(tables.orders),
        record_count=len(outcome.records),
        skipped_count=len(outcome.errors),
        output_path=str(output_path),
    )
    return ConversionSuccess(
        record_count=len(outcome.records),
        data=outcome.records[: config.preview_limit],
        output_path=output_path,
        errors=outcome.errors,
    )


def convert_files(sources: TableSources, config: ShipLabelConfig) -> ConversionResult:
    """Read the four input files and convert them.

    Raises:
        ShipLabelIngestError: If an input file cannot be read.
        ShipLabelStoreError: If the label file cannot be written.
    """
    tables = read_source_tables(sources, config)
    return convert_tables(tables, config)
