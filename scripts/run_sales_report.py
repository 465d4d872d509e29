#!/usr/bin/env python
"""Seller sales report CLI.

Compute the per-seller report (revenue, profit, top products, bonus) for a
dataset stored as JSON or YAML.

Usage:
    # Table output
    uv run python scripts/run_sales_report.py examples/data/sample_dataset.json

    # JSON output, top 5 products per seller
    uv run python scripts/run_sales_report.py data.yaml --top 5 --format json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from sales_analytics.core.exceptions import SalesAnalyticsError
from sales_analytics.core.logging import configure_logging
from sales_analytics.features.sales_report import SellerReport, analyze, default_options


def load_dataset(path: Path) -> Any:
    """Load a dataset from a JSON or YAML file.

    Args:
        path: Path to the dataset file (.json, .yaml or .yml).

    Returns:
        Decoded dataset.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file extension is not supported.
    """
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    with path.open(encoding="utf-8") as f:
        if path.suffix == ".json":
            return json.load(f)
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)

    raise ValueError(f"Unsupported dataset format: {path.suffix}. Use .json, .yaml or .yml")


def print_table(reports: list[SellerReport]) -> None:
    """Print the report as a fixed-width table."""
    print()
    print(f"  {'#':>3}  {'Seller':<28} {'Revenue':>12} {'Profit':>12} {'Receipts':>9} {'Bonus':>10}")
    print("-" * 82)
    for rank, report in enumerate(reports, 1):
        print(
            f"  {rank:>3}  {report.name:<28} {report.revenue:>12,} {report.profit:>12,} "
            f"{report.sales_count:>9,} {report.bonus:>10,}"
        )
    print("-" * 82)
    print()


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(description="Seller sales report")
    parser.add_argument("path", type=Path, help="Dataset file (.json, .yaml or .yml)")
    parser.add_argument(
        "--top",
        type=positive_int,
        default=10,
        help="Number of top products per seller (default: 10)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    return parser


def main() -> int:
    """Run the CLI."""
    args = create_parser().parse_args()
    configure_logging(log_level=args.log_level, log_format="console")

    try:
        dataset = load_dataset(args.path)
    except (FileNotFoundError, ValueError, yaml.YAMLError, json.JSONDecodeError) as e:
        print(f"ERROR: {e}")
        return 1

    try:
        reports = analyze(dataset, default_options(top_products_limit=args.top))
    except SalesAnalyticsError as e:
        print(f"ERROR [{e.code}]: {e.message}")
        return 2

    if args.format == "json":
        print(json.dumps([r.model_dump(mode="json") for r in reports], indent=2, ensure_ascii=False))
    else:
        print_table(reports)
    return 0


if __name__ == "__main__":
    sys.exit(main())
