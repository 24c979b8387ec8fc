"""Unit tests for label CSV writer."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from core.constants import OUTPUT_HEADER_LABELS
from core.errors import ShipLabelStoreError
from ingest.pipeline import transform_tables
from store.label_writer import build_output_file_name, write_label_csv
from tests.table_builders import build_tables


def test_write_label_csv_starts_with_byte_order_mark(tmp_path: Path) -> None:
    """Label files should begin with a UTF-8 BOM for spreadsheet tools."""
    records = transform_tables(build_tables()).records

    output_path = write_label_csv(records, tmp_path / "labels")

    assert output_path.read_bytes().startswith(b"\xef\xbb\xbf")


def test_write_label_csv_uses_carrier_header(tmp_path: Path) -> None:
    """Header row should be the Japanese labels in schema order."""
    records = transform_tables(build_tables(("ORD001", "ORD002"))).records

    output_path = write_label_csv(records, tmp_path)
    with output_path.open(encoding="utf-8-sig", newline="") as handle:
        rows = list(csv.reader(handle))

    assert rows[0] == list(OUTPUT_HEADER_LABELS.values())
    assert [row[0] for row in rows[1:]] == ["ORD001", "ORD002"]


def test_write_label_csv_raises_when_directory_is_a_file(tmp_path: Path) -> None:
    """Unwritable output locations should raise a store error."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(ShipLabelStoreError):
        write_label_csv([], blocker)


def test_build_output_file_name_uses_timestamp() -> None:
    """File names should carry the carrier prefix and millisecond timestamp."""
    assert build_output_file_name(1700000000000) == "yamato_labels_1700000000000.csv"
