"""Integration tests for the file-to-label conversion workflow."""

from __future__ import annotations

import csv
from dataclasses import replace

from core.config import ShipLabelConfig
from core.types import ConversionFailure, ConversionSuccess
from shiplabel import ShipLabelClient as PublicClient
from store.label_sdk import ShipLabelClient
from tests.fixture_paths import fixture_path, valid_sources
from tests.table_builders import build_tables


def test_convert_files_end_to_end(tmp_path) -> None:
    """Fixture files should convert into a complete label file."""
    client = ShipLabelClient(replace(ShipLabelConfig.from_env(), output_dir=tmp_path))

    result = client.convert_files(valid_sources())

    assert isinstance(result, ConversionSuccess)
    with result.output_path.open(encoding="utf-8-sig", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert [row["お客様管理番号"] for row in rows] == ["ORD001", "ORD002", "ORD003"]
    assert [row["配達指定時間"] for row in rows] == ["01", "05", ""]
    assert [row["クール区分"] for row in rows] == ["1", "0", "0"]
    assert [row["個数"] for row in rows] == ["2", "1", "5"]
    assert [row["配送方法"] for row in rows] == ["standard", "standard", "express"]


def test_convert_files_reports_unmatched_customer(tmp_path) -> None:
    """An unknown customer code should drop that order and keep the rest."""
    client = ShipLabelClient(replace(ShipLabelConfig.from_env(), output_dir=tmp_path))
    sources = valid_sources(orders=fixture_path("invalid/orders_unmatched.csv"))

    result = client.convert_files(sources)

    assert isinstance(result, ConversionSuccess)
    assert result.record_count == 1
    assert result.errors == ("Customer info not found for order ORD009",)


def test_convert_files_fails_for_header_only_orders(tmp_path) -> None:
    """An orders file without rows should fail validation."""
    client = ShipLabelClient(replace(ShipLabelConfig.from_env(), output_dir=tmp_path))
    sources = valid_sources(orders=fixture_path("invalid/header_only.csv"))

    result = client.convert_files(sources)

    assert isinstance(result, ConversionFailure)
    assert result.errors == ("orders file is empty",)


def test_sdk_surface_converts_in_memory_tables(tmp_path) -> None:
    """The public SDK should convert already-parsed tables."""
    client = PublicClient(replace(ShipLabelConfig.from_env(), output_dir=tmp_path))

    result = client.convert(build_tables(("ORD001", "ORD002")))

    assert result.to_payload()["recordCount"] == 2
    assert result.output_path.parent == tmp_path
