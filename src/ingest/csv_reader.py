"""CSV readers for conversion inputs.

This module loads the four input tables from local CSV files.
It normalizes every file into a list of header-keyed string rows.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any

from core.config import ShipLabelConfig
from core.constants import INPUT_ENCODING, INPUT_PREVIEW_LIMIT, SUPPORTED_INPUT_EXTENSIONS
from core.errors import ShipLabelIngestError
from core.types import CsvPreview, SourceTables, TableSources


def read_source_tables(sources: TableSources, config: ShipLabelConfig) -> SourceTables:
    """Load all four input tables.

    Args:
        sources: Paths of the orders, customers, shipping and products files.
        config: Runtime configuration with the file size limit.

    Returns:
        Parsed input tables.

    Raises:
        ShipLabelIngestError: If any file cannot be read.
    """
    return SourceTables(
        orders=read_csv_rows(sources.orders, max_bytes=config.max_file_bytes),
        customers=read_csv_rows(sources.customers, max_bytes=config.max_file_bytes),
        shipping=read_csv_rows(sources.shipping, max_bytes=config.max_file_bytes),
        products=read_csv_rows(sources.products, max_bytes=config.max_file_bytes),
    )


def preview_csv(source_path: Path, config: ShipLabelConfig) -> CsvPreview:
    """Read the header and leading rows of one CSV file.

    Args:
        source_path: CSV file to inspect.
        config: Runtime configuration with the file size limit.

    Returns:
        Header names of the first row and up to five rows.
    """
    rows = read_csv_rows(source_path, limit=INPUT_PREVIEW_LIMIT, max_bytes=config.max_file_bytes)
    headers = tuple(rows[0]) if rows else ()
    return CsvPreview(headers=headers, rows=tuple(rows))


def read_csv_rows(
    source_path: Path,
    limit: int | None = None,
    max_bytes: int | None = None,
) -> list[dict[str, str]]:
    """Parse a CSV file into header-keyed rows.

    Args:
        source_path: CSV file path.
        limit: Optional maximum number of rows to return.
        max_bytes: Optional maximum accepted file size.

    Returns:
        Rows in file order. Short rows are padded with empty strings.

    Raises:
        ShipLabelIngestError: If the file is missing, too large or malformed,
            or a row has more cells than the header.
    """
    file_path = Path(source_path).expanduser()
    _check_source_file(file_path, max_bytes)
    try:
        with file_path.open(encoding=INPUT_ENCODING, newline="") as handle:
            return _parse_rows(csv.reader(handle), file_path, limit)
    except UnicodeDecodeError as error:
        raise ShipLabelIngestError(
            f"Failed to decode {file_path}: {error.reason}. Save the file as UTF-8 and retry."
        ) from error
    except csv.Error as error:
        raise ShipLabelIngestError(
            f"Failed to parse CSV at {file_path}: {error}. Fix the CSV syntax and retry."
        ) from error
    except OSError as error:
        raise ShipLabelIngestError(
            f"Failed to read {file_path}: {error}. Check file permissions and retry."
        ) from error


def _check_source_file(file_path: Path, max_bytes: int | None) -> None:
    if not file_path.is_file():
        raise ShipLabelIngestError(
            f"Failed to read CSV at {file_path}: file does not exist. Provide an existing CSV file."
        )
    if file_path.suffix.lower() not in SUPPORTED_INPUT_EXTENSIONS:
        raise ShipLabelIngestError(
            f"Unsupported input file {file_path}: only CSV files are allowed. "
            "Export the table as .csv and retry."
        )
    if max_bytes is not None and file_path.stat().st_size > max_bytes:
        raise ShipLabelIngestError(
            f"Input file {file_path} exceeds the {max_bytes}-byte limit. "
            "Split the file or raise SHIPLABEL_MAX_FILE_BYTES."
        )


def _parse_rows(reader: Any, file_path: Path, limit: int | None) -> list[dict[str, str]]:
    """Convert raw CSV records into dict rows keyed by stripped header names."""
    header = next(reader, None)
    if header is None:
        return []
    columns = [column.strip() for column in header]
    rows: list[dict[str, str]] = []
    for record in reader:
        if limit is not None and len(rows) >= limit:
            break
        if not any(cell.strip() for cell in record):
            continue
        if len(record) > len(columns):
            raise ShipLabelIngestError(
                f"Row at {file_path}:{reader.line_num} has {len(record)} cells "
                f"but the header has {len(columns)}. Remove the extra cells and retry."
            )
        padded = record + [""] * (len(columns) - len(record))
        rows.append(dict(zip(columns, padded)))
    return rows
