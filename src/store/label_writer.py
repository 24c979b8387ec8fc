"""Carrier label CSV writer.

This module persists formatted label records as a CSV file using the
carrier's Japanese header row and a UTF-8 byte-order mark.
"""

from __future__ import annotations

import csv
import time
from pathlib import Path
from typing import Iterable

from core.constants import OUTPUT_ENCODING, OUTPUT_FIELDS, OUTPUT_FILE_PREFIX, OUTPUT_HEADER_LABELS
from core.errors import ShipLabelStoreError
from core.types import LabelRecord


def write_label_csv(records: Iterable[LabelRecord], output_dir: Path) -> Path:
    """Write label records to a new timestamped CSV file.

    Args:
        records: Label rows in output order.
        output_dir: Target directory, created when missing.

    Returns:
        Path of the written file.

    Raises:
        ShipLabelStoreError: If the directory or file cannot be written.
    """
    output_path = output_dir / build_output_file_name(time.time_ns() // 1_000_000)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding=OUTPUT_ENCODING, newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(OUTPUT_HEADER_LABELS[field_name] for field_name in OUTPUT_FIELDS)
            for record in records:
                writer.writerow(record.as_row()[field_name] for field_name in OUTPUT_FIELDS)
    except OSError as error:
        raise ShipLabelStoreError(
            f"Failed to write label file at {output_path}: {error}. "
            "Check that the output directory is writable."
        ) from error
    return output_path


def build_output_file_name(timestamp_ms: int) -> str:
    """Return the label file name for a millisecond timestamp."""
    return f"{OUTPUT_FILE_PREFIX}{timestamp_ms}.csv"
