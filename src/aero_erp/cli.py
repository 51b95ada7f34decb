#!/usr/bin/env python3
"""
Aero ERP command line.

Usage:
    aero-erp normalize -f backup.json                  # print canonical JSON and save it
    aero-erp normalize -f export.json -o stdout        # stdout only
    aero-erp normalize -f export.json --method Air     # Air default for missing methods
    aero-erp economics -f backup.json                  # per-SKU profit / stock table
    aero-erp describe --name "Earbuds" --features "ANC, 30h battery"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from aero_erp.calculators.unit_economics import days_of_stock, stock_urgency, unit_profit
from aero_erp.core.config import IMPORT_DEFAULT_METHOD, LOG_LEVEL, OUTPUT_DIR, validate_config
from aero_erp.core.schema import Product, to_json
from aero_erp.pipelines.importer import import_file, save_products

logger = logging.getLogger(__name__)


def _load(path: str, method: str) -> List[Product]:
    result = import_file(path, default_method=method)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        sys.exit(1)
    print(result.summary(), file=sys.stderr)
    return result.products


def cmd_normalize(args: argparse.Namespace) -> None:
    products = _load(args.file, args.method)

    if args.output in ("stdout", "both"):
        print(to_json(products))

    if args.output in ("file", "both"):
        output_dir = Path(args.output_dir or OUTPUT_DIR)
        output_path = output_dir / f"{Path(args.file).stem}.normalized.json"
        saved_path = save_products(products, output_path)
        print(f"Saved to: {saved_path}", file=sys.stderr)


def cmd_economics(args: argparse.Namespace) -> None:
    products = _load(args.file, args.method)

    header = f"{'SKU':<20} {'Price':>9} {'Cost':>9} {'Profit':>9} {'Margin%':>8} {'Days':>6}  Stock"
    print(header)
    print("-" * len(header))
    for product in products:
        econ = unit_profit(product)
        days = days_of_stock(product)
        print(
            f"{product.sku[:20]:<20} {econ.selling_price:>9.2f} {econ.total_cost:>9.2f} "
            f"{econ.profit:>9.2f} {econ.margin_percent:>8.1f} {days:>6}  {stock_urgency(days)}"
        )


def cmd_describe(args: argparse.Namespace) -> None:
    validate_config()

    from aero_erp.extraction.copywriter import (
        create_client, generate_product_description, optimize_product_title,
    )

    client = create_client()
    if args.keywords:
        print(optimize_product_title(client, args.name, args.keywords))
        print()
    print(generate_product_description(client, args.name, args.features, args.tone))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aero-erp",
        description="Normalize product catalog JSON and run unit-economics reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  IMPORT_DEFAULT_METHOD  Shipping method for imported records without one (default: Sea)
  ANTHROPIC_API_KEY      Required for the describe command
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Normalize a JSON file into canonical records")
    normalize.add_argument("-f", "--file", required=True, help="Path to a .json file")
    normalize.add_argument(
        "-o", "--output",
        choices=["stdout", "file", "both"],
        default="both",
        help="Output mode: 'stdout', 'file', or 'both' (default: both)",
    )
    normalize.add_argument("--output-dir", help=f"Directory for saved output (default: {OUTPUT_DIR})")
    normalize.add_argument(
        "--method",
        choices=["Air", "Sea", "Rail"],
        default=IMPORT_DEFAULT_METHOD,
        help=f"Default shipping method (default: {IMPORT_DEFAULT_METHOD})",
    )
    normalize.set_defaults(func=cmd_normalize)

    economics = subparsers.add_parser("economics", help="Print per-SKU profit and stock cover")
    economics.add_argument("-f", "--file", required=True, help="Path to a .json file")
    economics.add_argument("--method", choices=["Air", "Sea", "Rail"], default=IMPORT_DEFAULT_METHOD)
    economics.set_defaults(func=cmd_economics)

    describe = subparsers.add_parser("describe", help="Generate marketplace copy with Claude")
    describe.add_argument("--name", required=True, help="Product name")
    describe.add_argument("--features", required=True, help="Key features to highlight")
    describe.add_argument("--keywords", help="Also optimize the title with these keywords")
    describe.add_argument("--tone", default="Professional")
    describe.set_defaults(func=cmd_describe)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    args = build_parser().parse_args(argv)

    try:
        args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
