"""Core constants used across shiplabel modules.

This module centralizes column schemas, carrier lookup tables and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

TABLE_NAMES = ("orders", "customers", "shipping", "products")

REQUIRED_COLUMNS = MappingProxyType(
    {
        "orders": (
            "order_id",
            "order_date",
            "product_code",
            "quantity",
            "customer_code",
            "delivery_postal_code",
            "delivery_address",
            "delivery_name",
            "delivery_phone",
        ),
        "customers": (
            "customer_code",
            "customer_name",
            "customer_postal_code",
            "customer_address",
            "customer_phone",
            "delivery_type",
        ),
        "shipping": (
            "order_id",
            "desired_delivery_date",
            "desired_delivery_time",
            "shipping_method",
            "cash_on_delivery",
            "notes",
        ),
        "products": (
            "product_code",
            "product_name",
            "weight",
            "size_category",
            "unit_price",
            "category",
            "packaging_type",
        ),
    }
)

CUSTOMER_JOIN_KEY = "customer_code"
SHIPPING_JOIN_KEY = "order_id"
PRODUCT_JOIN_KEY = "product_code"

DELIVERY_TIME_CODES = MappingProxyType(
    {
        "午前中": "01",
        "14-16時": "05",
        "16-18時": "06",
        "18-20時": "07",
    }
)
COOL_DELIVERY_MARKER = "冷蔵配送"
SHIPPING_LABEL_TYPE = "0"
DEFAULT_QUANTITY = "1"
DEFAULT_CASH_ON_DELIVERY = "0"
DEFAULT_SHIPPING_METHOD = "standard"

OUTPUT_HEADER_LABELS = MappingProxyType(
    {
        "customer_reference_number": "お客様管理番号",
        "shipping_label_type": "送り状種類",
        "cool_delivery_classification": "クール区分",
        "delivery_date": "配達指定日",
        "delivery_time_code": "配達指定時間",
        "sender_postal_code": "発送元郵便番号",
        "sender_address": "発送元住所",
        "sender_name": "発送元名前",
        "sender_phone": "発送元電話番号",
        "recipient_postal_code": "配送先郵便番号",
        "recipient_address": "配送先住所",
        "recipient_name": "配送先名前",
        "recipient_phone": "配送先電話番号",
        "product_name": "品名",
        "quantity": "個数",
        "weight": "重量",
        "size_category": "サイズ",
        "cash_on_delivery": "代金引換",
        "shipping_method": "配送方法",
        "notes": "備考",
    }
)
OUTPUT_FIELDS = tuple(OUTPUT_HEADER_LABELS)

DEFAULT_OUTPUT_DIR = Path("output")
DEFAULT_PREVIEW_LIMIT = 10
INPUT_PREVIEW_LIMIT = 5
DEFAULT_MAX_FILE_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
SUPPORTED_INPUT_EXTENSIONS = (".csv",)
INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8-sig"
OUTPUT_FILE_PREFIX = "yamato_labels_"
JOB_SPEC_VERSION = 1
