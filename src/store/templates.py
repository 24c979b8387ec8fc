"""Sample input templates.

This module provides a header plus one example row for each input table
so users can start from a correctly structured file.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from types import MappingProxyType

from core.constants import INPUT_ENCODING, REQUIRED_COLUMNS, TABLE_NAMES
from core.errors import ShipLabelStoreError, ShipLabelTemplateError

_SAMPLE_ROWS = MappingProxyType(
    {
        "orders": (
            "ORD001",
            "2024-01-15",
            "PRD001",
            "2",
            "CUST001",
            "100-0001",
            "東京都千代田区",
            "田中太郎",
            "03-1234-5678",
        ),
        "customers": (
            "CUST001",
            "株式会社サンプル",
            "100-0002",
            "東京都千代田区",
            "03-1234-5678",
            "standard",
        ),
        "shipping": ("ORD001", "2024-01-20", "午前中", "standard", "0", "通常配送"),
        "products": ("PRD001", "サンプル商品", "500", "S", "1000", "electronics", "box"),
    }
)


def template_csv(table_name: str) -> str:
    """Return template CSV text for an input table.

    Args:
        table_name: One of ``orders``, ``customers``, ``shipping``, ``products``.

    Returns:
        CSV text with the required header and one sample row.

    Raises:
        ShipLabelTemplateError: If the table name is unknown.
    """
    if table_name not in _SAMPLE_ROWS:
        raise ShipLabelTemplateError(
            f"Template not found for '{table_name}'. Choose one of: {', '.join(TABLE_NAMES)}."
        )
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(REQUIRED_COLUMNS[table_name])
    writer.writerow(_SAMPLE_ROWS[table_name])
    return buffer.getvalue()


def write_template(table_name: str, output_dir: Path) -> Path:
    """Write ``<table_name>.csv`` into the output directory and return its path."""
    content = template_csv(table_name)
    template_path = output_dir / f"{table_name}.csv"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        template_path.write_text(content, encoding=INPUT_ENCODING)
    except OSError as error:
        raise ShipLabelStoreError(
            f"Failed to write template at {template_path}: {error}. "
            "Check that the output directory is writable."
        ) from error
    return template_path
