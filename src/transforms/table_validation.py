"""Structural validation of the four input tables.

This module checks that every table is present, non-empty and carries
its required columns. It is the first stage of the conversion pipeline.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import REQUIRED_COLUMNS
from core.types import RawRow, SourceTables

VALIDATION_FAILED_MESSAGE = "CSV validation failed"


def validate_tables(tables: SourceTables) -> tuple[str, ...]:
    """Collect every structural problem across the input tables.

    Args:
        tables: Parsed input tables.

    Returns:
        Human-readable messages; empty when all tables are valid.
    """
    errors: list[str] = []
    for table_name, rows in tables.items():
        errors.extend(_validate_table(table_name, rows))
    return tuple(errors)


def _validate_table(table_name: str, rows: Sequence[RawRow] | None) -> list[str]:
    """Validate one table using the header set of its first row.

    Later rows are not inspected, so ragged tables pass this stage.
    """
    if not rows:
        return [f"{table_name} file is empty"]
    headers = set(rows[0])
    return [
        f"{table_name} file is missing required column '{column}'"
        for column in REQUIRED_COLUMNS.get(table_name, ())
        if column not in headers
    ]
