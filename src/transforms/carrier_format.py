"""Carrier label formatting transform.

This module maps merged order records onto the fixed 20-field
Yamato label schema. It never fails: absent values take defaults.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import (
    COOL_DELIVERY_MARKER,
    DEFAULT_CASH_ON_DELIVERY,
    DEFAULT_QUANTITY,
    DEFAULT_SHIPPING_METHOD,
    DELIVERY_TIME_CODES,
    SHIPPING_LABEL_TYPE,
)
from core.types import LabelRecord, MergedRecord


def format_records(records: Iterable[MergedRecord]) -> list[LabelRecord]:
    """Format merged records as carrier label rows.

    Args:
        records: Merged records in output order.

    Returns:
        One label record per input record, order preserved.
    """
    return [format_record(record) for record in records]


def format_record(record: MergedRecord) -> LabelRecord:
    """Map one merged record onto the label schema."""
    notes = _text(record, "notes")
    return LabelRecord(
        customer_reference_number=_text(record, "order_id"),
        shipping_label_type=SHIPPING_LABEL_TYPE,
        cool_delivery_classification=classify_cool_delivery(notes),
        delivery_date=_text(record, "desired_delivery_date"),
        delivery_time_code=resolve_time_code(record.value("desired_delivery_time")),
        sender_postal_code=_text(record, "customer_postal_code"),
        sender_address=_text(record, "customer_address"),
        sender_name=_text(record, "customer_name"),
        sender_phone=_text(record, "customer_phone"),
        recipient_postal_code=_text(record, "delivery_postal_code"),
        recipient_address=_text(record, "delivery_address"),
        recipient_name=_text(record, "delivery_name"),
        recipient_phone=_text(record, "delivery_phone"),
        product_name=_text(record, "product_name"),
        quantity=_text(record, "quantity", DEFAULT_QUANTITY),
        weight=_text(record, "weight"),
        size_category=_text(record, "size_category"),
        cash_on_delivery=_text(record, "cash_on_delivery", DEFAULT_CASH_ON_DELIVERY),
        shipping_method=_text(record, "shipping_method", DEFAULT_SHIPPING_METHOD),
        notes=notes,
    )


def resolve_time_code(time_label: str | None) -> str:
    """Translate a delivery time-window label into its two-digit carrier code.

    Args:
        time_label: Label such as ``午前中`` or ``14-16時``.

    Returns:
        Carrier code, or an empty string for unknown or missing labels.
    """
    if not time_label:
        return ""
    return DELIVERY_TIME_CODES.get(time_label, "")


def classify_cool_delivery(notes: str | None) -> str:
    """Return ``1`` when notes request refrigerated delivery, else ``0``."""
    if notes and COOL_DELIVERY_MARKER in notes:
        return "1"
    return "0"


def _text(record: MergedRecord, field_name: str, default: str = "") -> str:
    # empty strings fall back to the default too
    return record.value(field_name) or default
