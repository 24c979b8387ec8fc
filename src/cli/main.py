"""shiplabel CLI entry points.
This module exposes commands for conversion, input preview and templates.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import ShipLabelConfig
from core.constants import TABLE_NAMES
from core.errors import ShipLabelError
from core.job_spec import load_job_spec
from core.types import ConversionFailure, ConversionResult, TableSources
from store.label_sdk import ShipLabelClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="shiplabel", description="Convert order CSVs into Yamato shipping labels"
    )
    parser.add_argument("--output-dir", help="Override SHIPLABEL_OUTPUT_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_convert_command(subparsers)
    _add_preview_command(subparsers)
    _add_template_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shiplabel CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "convert":
            return _run_convert_command(args, parser)
        client = _build_client(args.output_dir)
        if args.command == "preview":
            return _run_preview_command(client, args)
        if args.command == "template":
            return _run_template_command(client, args)
    except ShipLabelError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(output_dir: str | Path | None) -> ShipLabelClient:
    """Build SDK client with optional output-dir override.

    Args:
        output_dir: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = ShipLabelConfig.from_env()
    if output_dir:
        config = replace(config, output_dir=Path(output_dir).expanduser().resolve())
    return ShipLabelClient(config)


def _run_convert_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Handle convert command.

    Args:
        args: Parsed CLI args.
        parser: Parser used to report usage errors.

    Returns:
        Exit code.
    """
    output_dir = args.output_dir
    if args.job:
        job = load_job_spec(args.job)
        sources = job.sources
        output_dir = output_dir or job.output_dir
    else:
        missing = [name for name in TABLE_NAMES if getattr(args, name) is None]
        if missing:
            parser.error(
                "convert requires --job or all of "
                + ", ".join(f"--{name}" for name in missing)
            )
        sources = TableSources(**{name: Path(getattr(args, name)) for name in TABLE_NAMES})
    client = _build_client(output_dir)
    result = client.convert_files(sources)
    if args.json:
        print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))
    else:
        _print_conversion_result(result)
    return 1 if isinstance(result, ConversionFailure) else 0


def _print_conversion_result(result: ConversionResult) -> None:
    if isinstance(result, ConversionFailure):
        print(f"error={result.error}")
        for message in result.errors:
            print(f"detail={message}")
        return
    print(f"record_count={result.record_count}")
    print(f"output_path={result.output_path}")
    for message in result.errors:
        print(f"warning={message}")


def _run_preview_command(client: ShipLabelClient, args: argparse.Namespace) -> int:
    """Handle preview command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    preview = client.preview(args.file)
    print("\t".join(preview.headers))
    for row in preview.rows:
        print("\t".join(row.get(header, "") for header in preview.headers))
    return 0


def _run_template_command(client: ShipLabelClient, args: argparse.Namespace) -> int:
    """Handle template command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    template_path = client.template(args.table)
    print(template_path)
    return 0


def _add_convert_command(subparsers: Any) -> None:
    """Register convert subcommand."""
    parser = subparsers.add_parser("convert", help="Convert four input CSVs into a label file")
    parser.add_argument("--job", help="YAML job file naming the input CSVs")
    for table_name in TABLE_NAMES:
        parser.add_argument(f"--{table_name}", help=f"Path to the {table_name} CSV")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result payload as JSON",
    )


def _add_preview_command(subparsers: Any) -> None:
    """Register preview subcommand."""
    parser = subparsers.add_parser("preview", help="Show header and first rows of a CSV")
    parser.add_argument("file", help="CSV file to preview")


def _add_template_command(subparsers: Any) -> None:
    """Register template subcommand."""
    parser = subparsers.add_parser("template", help="Write a sample input CSV")
    parser.add_argument("table", choices=TABLE_NAMES, help="Input table name")
