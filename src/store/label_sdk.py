"""Python SDK for label conversion workflows.

This module exposes high-level APIs for converting input tables,
previewing input files and writing templates.
"""

from __future__ import annotations

from pathlib import Path

from core.config import ShipLabelConfig
from core.logging_config import configure_logging
from core.types import ConversionResult, CsvPreview, SourceTables, TableSources
from ingest.csv_reader import preview_csv
from ingest.pipeline import convert_files, convert_tables
from store.templates import write_template


class ShipLabelClient:
    """Primary SDK entry point for label conversion."""

    def __init__(self, config: ShipLabelConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or ShipLabelConfig.from_env()
        configure_logging(self._config.log_level)

    def convert(self, tables: SourceTables) -> ConversionResult:
        """Convert already-parsed tables into a label file.

        Args:
            tables: Parsed input tables.

        Returns:
            Conversion success or failure.

        Raises:
            ShipLabelStoreError: If the label file cannot be written.
        """
        return convert_tables(tables, self._config)

    def convert_files(self, sources: TableSources) -> ConversionResult:
        """Read four CSV files and convert them into a label file.

        Raises:
            ShipLabelIngestError: If an input file cannot be read.
            ShipLabelStoreError: If the label file cannot be written.
        """
        return convert_files(sources, self._config)

    def preview(self, source_path: str | Path) -> CsvPreview:
        """Return header and leading rows of an input CSV file."""
        return preview_csv(Path(source_path), self._config)

    def template(self, table_name: str) -> Path:
        """Write the template for an input table and return its path.

        Raises:
            ShipLabelTemplateError: If the table name is unknown.
        """
        return write_template(table_name, self._config.output_dir)
