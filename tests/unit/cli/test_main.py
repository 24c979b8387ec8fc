"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path, valid_sources


def _convert_args(output_dir: Path, orders: Path | None = None) -> list[str]:
    sources = valid_sources()
    return [
        "--output-dir",
        str(output_dir),
        "convert",
        "--orders",
        str(orders or sources.orders),
        "--customers",
        str(sources.customers),
        "--shipping",
        str(sources.shipping),
        "--products",
        str(sources.products),
    ]


def test_cli_convert_prints_record_count_and_path(tmp_path: Path, capsys) -> None:
    """CLI convert should print the written file location."""
    exit_code = main(_convert_args(tmp_path))
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "record_count=3" in output
    assert "output_path=" in output and list(tmp_path.glob("yamato_labels_*.csv"))


def test_cli_convert_prints_partial_failures_as_warnings(tmp_path: Path, capsys) -> None:
    """Orders that cannot be joined should appear as warnings."""
    exit_code = main(_convert_args(tmp_path, fixture_path("invalid/orders_unmatched.csv")))
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "record_count=1" in output
    assert "warning=Customer info not found for order ORD009" in output


def test_cli_convert_returns_one_on_validation_failure(tmp_path: Path, capsys) -> None:
    """Validation failures should print every detail and exit one."""
    exit_code = main(_convert_args(tmp_path, fixture_path("invalid/orders_missing_column.csv")))
    output = capsys.readouterr().out

    assert exit_code == 1
    assert "error=CSV validation failed" in output
    assert "detail=orders file is missing required column 'customer_code'" in output


def test_cli_convert_json_payload(tmp_path: Path, capsys) -> None:
    """The --json flag should print the full result payload."""
    exit_code = main([*_convert_args(tmp_path), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["success"] is True and payload["recordCount"] == 3
    assert payload["data"][0]["cool_delivery_classification"] == "1"


def test_cli_convert_runs_job_file(tmp_path: Path, capsys) -> None:
    """A job file should supply the four input paths."""
    exit_code = main(
        ["--output-dir", str(tmp_path), "convert", "--job", str(fixture_path("valid_job.yaml"))]
    )
    output = capsys.readouterr().out

    assert exit_code == 0 and "record_count=3" in output


def test_cli_convert_requires_all_inputs_without_job(tmp_path: Path) -> None:
    """Omitting input files without a job file should be a usage error."""
    with pytest.raises(SystemExit) as exit_info:
        main(["--output-dir", str(tmp_path), "convert", "--orders", "orders.csv"])

    assert exit_info.value.code == 2


def test_cli_convert_reports_missing_file_without_traceback(tmp_path: Path, capsys) -> None:
    """Unreadable inputs should print a friendly error."""
    exit_code = main(_convert_args(tmp_path, tmp_path / "missing.csv"))
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")


def test_cli_preview_prints_header_and_rows(tmp_path: Path, capsys) -> None:
    """Preview should print the header followed by data rows."""
    exit_code = main(
        ["--output-dir", str(tmp_path), "preview", str(fixture_path("valid/customers.csv"))]
    )
    lines = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert lines[0].split("\t")[0] == "customer_code"
    assert len(lines) == 3


def test_cli_template_writes_file(tmp_path: Path, capsys) -> None:
    """Template should write the sample file into the output dir."""
    exit_code = main(["--output-dir", str(tmp_path), "template", "orders"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and Path(output) == tmp_path / "orders.csv"
