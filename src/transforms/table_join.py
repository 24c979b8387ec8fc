"""Key-lookup join of orders against customers, shipping and products.

This module builds one lookup map per reference table and attaches the
matching rows to every order. Orders that cannot be joined are skipped
and reported without aborting the batch.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import CUSTOMER_JOIN_KEY, PRODUCT_JOIN_KEY, SHIPPING_JOIN_KEY
from core.logging_config import get_logger
from core.types import JoinResult, MergedRecord, RawRow, SourceTables

MERGE_FAILED_MESSAGE = "Data merge failed"

_LOGGER = get_logger(__name__)


def join_tables(tables: SourceTables) -> JoinResult:
    """Join every order with its customer, shipping and product rows.

    Args:
        tables: Validated input tables.

    Returns:
        Merged records in order-row order plus per-order failure messages.
    """
    customers_by_code = build_lookup(tables.customers, CUSTOMER_JOIN_KEY, "customers")
    shipping_by_order = build_lookup(tables.shipping, SHIPPING_JOIN_KEY, "shipping")
    products_by_code = build_lookup(tables.products, PRODUCT_JOIN_KEY, "products")
    records: list[MergedRecord] = []
    errors: list[str] = []
    for position, order in enumerate(tables.orders, 1):
        order_id = order.get("order_id") or f"row {position}"
        try:
            record, message = _join_order(
                order, customers_by_code, shipping_by_order, products_by_code
            )
        except Exception as error:
            record, message = None, f"Error processing order {order_id}: {error}"
        if record is None:
            _LOGGER.debug("join_order_skipped", order_id=order_id, reason=message)
            errors.append(message)
            continue
        records.append(record)
    return JoinResult(records=tuple(records), errors=tuple(errors))


def build_lookup(rows: Sequence[RawRow], key: str, table_name: str) -> dict[str, RawRow]:
    """Index rows by a join key column.

    When several rows share a key the last one wins.

    Args:
        rows: Table rows.
        key: Join key column name.
        table_name: Table name for log context.

    Returns:
        Mapping of key value to row.
    """
    lookup: dict[str, RawRow] = {}
    for row in rows:
        key_value = row.get(key)
        if key_value is None:
            continue
        if key_value in lookup:
            _LOGGER.warning("duplicate_join_key", table=table_name, key=key, value=key_value)
        lookup[key_value] = row
    return lookup


def _join_order(
    order: RawRow,
    customers_by_code: dict[str, RawRow],
    shipping_by_order: dict[str, RawRow],
    products_by_code: dict[str, RawRow],
) -> tuple[MergedRecord | None, str]:
    """Join one order row, returning the record or the first failure message."""
    order_id = order["order_id"]
    customer = customers_by_code.get(order[CUSTOMER_JOIN_KEY])
    if customer is None:
        return None, f"Customer info not found for order {order_id}"
    shipping = shipping_by_order.get(order[SHIPPING_JOIN_KEY])
    if shipping is None:
        return None, f"Shipping info not found for order {order_id}"
    product = products_by_code.get(order[PRODUCT_JOIN_KEY])
    if product is None:
        return None, f"Product info not found for order {order_id}"
    return MergedRecord(order=order, customer=customer, shipping=shipping, product=product), ""
