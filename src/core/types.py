"""Shared typed models.

This module defines immutable data models used by the ingest, transform,
store and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterator, Literal, Mapping, Sequence, Union

RawRow = Mapping[str, str]
FailureKind = Literal["validation", "merge"]


@dataclass(frozen=True)
class SourceTables:
    """The four parsed input tables of one conversion.

    Attributes:
        orders: Order rows; one label is produced per joinable order.
        customers: Customer rows keyed by ``customer_code``.
        shipping: Shipping instruction rows keyed by ``order_id``.
        products: Product rows keyed by ``product_code``.
    """

    orders: Sequence[RawRow] = ()
    customers: Sequence[RawRow] = ()
    shipping: Sequence[RawRow] = ()
    products: Sequence[RawRow] = ()

    def items(self) -> Iterator[tuple[str, Sequence[RawRow]]]:
        """Yield ``(table_name, rows)`` pairs in fixed table order."""
        for table_field in fields(self):
            yield table_field.name, getattr(self, table_field.name)


@dataclass(frozen=True)
class TableSources:
    """Filesystem locations of the four input CSV files."""

    orders: Path
    customers: Path
    shipping: Path
    products: Path


@dataclass(frozen=True)
class MergedRecord:
    """One order row together with its matched customer, shipping and product rows.

    Field lookups resolve right to left: product, shipping, customer, order.
    A later source wins when two rows share a column name.
    """

    order: RawRow
    customer: RawRow
    shipping: RawRow
    product: RawRow

    def value(self, field_name: str) -> str | None:
        """Return the highest-precedence value for a column, or None if absent."""
        for row in (self.product, self.shipping, self.customer, self.order):
            if field_name in row:
                return row[field_name]
        return None


@dataclass(frozen=True)
class LabelRecord:
    """One row of the carrier label CSV. Field order is the output column order."""

    customer_reference_number: str
    shipping_label_type: str
    cool_delivery_classification: str
    delivery_date: str
    delivery_time_code: str
    sender_postal_code: str
    sender_address: str
    sender_name: str
    sender_phone: str
    recipient_postal_code: str
    recipient_address: str
    recipient_name: str
    recipient_phone: str
    product_name: str
    quantity: str
    weight: str
    size_category: str
    cash_on_delivery: str
    shipping_method: str
    notes: str

    def as_row(self) -> dict[str, str]:
        """Return the record as an ordered field-id to value mapping."""
        return {label_field.name: getattr(self, label_field.name) for label_field in fields(self)}


@dataclass(frozen=True)
class JoinResult:
    """Merged records plus per-order join failures."""

    records: tuple[MergedRecord, ...]
    errors: tuple[str, ...]


@dataclass(frozen=True)
class TransformSuccess:
    """Output of the pure validate, join and format stages."""

    records: tuple[LabelRecord, ...]
    errors: tuple[str, ...] = ()
    success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class ConversionSuccess:
    """Successful conversion with the written label file.

    Attributes:
        record_count: Number of label rows written.
        data: Leading output rows for preview.
        output_path: Path of the written label CSV.
        errors: Non-fatal per-order join failures.
    """

    record_count: int
    data: tuple[LabelRecord, ...]
    output_path: Path
    errors: tuple[str, ...] = ()
    success: Literal[True] = field(default=True, init=False)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible result payload."""
        return {
            "success": True,
            "recordCount": self.record_count,
            "data": [record.as_row() for record in self.data],
            "outputPath": str(self.output_path),
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class ConversionFailure:
    """Fatal conversion failure with every collected message.

    Attributes:
        kind: ``validation`` for structural problems, ``merge`` when no order joined.
        error: Top-level summary message.
        errors: Detailed messages for the end user.
    """

    kind: FailureKind
    error: str
    errors: tuple[str, ...]
    success: Literal[False] = field(default=False, init=False)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible result payload."""
        return {"success": False, "error": self.error, "errors": list(self.errors)}


@dataclass(frozen=True)
class CsvPreview:
    """Header names and leading rows of one CSV file."""

    headers: tuple[str, ...]
    rows: tuple[dict[str, str], ...]


TransformResult = Union[TransformSuccess, ConversionFailure]
ConversionResult = Union[ConversionSuccess, ConversionFailure]
