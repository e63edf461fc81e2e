#!/usr/bin/env python3
"""
Price Table Fetch Script

Runs the price pipeline once (service account token exchange, sheet read,
normalization) and prints the resulting table as JSON.

Usage:
    python fetch_prices.py
    python fetch_prices.py --range "Лист1!A:C" --indent 2
    python fetch_prices.py --spreadsheet-id 1abc... --output prices.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.errors import PriceFetchError
from services.price_service import fetch_price_table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Fetch the buy-back price table from Google Sheets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  GOOGLE_SERVICE_ACCOUNT_KEY  Service account JSON document (required)
  PRICE_SPREADSHEET_ID        Default spreadsheet
  PRICE_SHEET_RANGE           Default range
        """
    )

    parser.add_argument(
        "--spreadsheet-id",
        help="Spreadsheet to read (defaults to PRICE_SPREADSHEET_ID)"
    )

    parser.add_argument(
        "--range",
        dest="range_spec",
        help="A1 range with model, storage and price columns (defaults to PRICE_SHEET_RANGE)"
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print JSON with this indent"
    )

    parser.add_argument(
        "--output",
        "-o",
        help="Write JSON to this file instead of stdout"
    )

    args = parser.parse_args(argv)

    try:
        result = fetch_price_table(
            spreadsheet_id=args.spreadsheet_id,
            range_spec=args.range_spec,
        )
    except PriceFetchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    document = json.dumps(
        {"prices": result.prices, "dropped_rows": result.dropped_rows},
        ensure_ascii=False,
        indent=args.indent,
    )

    if args.output:
        Path(args.output).write_text(document + "\n", encoding="utf-8")
        print(f"✓ Wrote {result.entry_count} prices for {len(result.prices)} models to {args.output}")
    else:
        print(document)

    if result.dropped_rows:
        print(f"Skipped {result.dropped_rows} sheet rows that did not normalize", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
