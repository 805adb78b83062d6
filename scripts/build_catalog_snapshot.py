from __future__ import annotations

import argparse
import json
import os
import sys
from collections import Counter
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

from catalog.catalog_client import fetch_catalog_snapshot
from components.product_catalog import normalize_catalog, read_catalog_file
from config import configure_logging


def _eligible(item) -> bool:
    return bool(item.id and item.category and item.in_stock and item.stock_qty > 0 and item.price > 0)


def main() -> None:
    parser = argparse.ArgumentParser(description="Build the look engine's catalog snapshot")
    parser.add_argument("--url", default=os.getenv("DRESSER_CATALOG_URL", ""),
                        help="Storefront product export endpoint")
    parser.add_argument("--input", default=None,
                        help="Read a raw export file instead of fetching")
    parser.add_argument("--out", default="data/products_live.json")
    parser.add_argument("--page-size", type=int, default=200)
    parser.add_argument("--include-out-of-stock", action="store_true")
    args = parser.parse_args()

    configure_logging()

    if args.input:
        rows = read_catalog_file(Path(args.input))
        source = args.input
    elif args.url:
        rows = fetch_catalog_snapshot(
            args.url,
            in_stock_only=not args.include_out_of_stock,
            page_size=args.page_size,
        )
        source = args.url
    else:
        parser.error("Provide --url (or DRESSER_CATALOG_URL) or --input.")

    rows = [row for row in rows if isinstance(row, dict)]
    items = normalize_catalog(rows)
    kept = [row for row, item in zip(rows, items) if _eligible(item)]

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(kept, indent=2, ensure_ascii=False))

    cats = Counter(item.category for item in items if _eligible(item))
    print(f"\n{'='*50}")
    print(f"Source: {source}")
    print(f"Wrote {len(kept)} of {len(rows)} products -> {out_path}")
    print(f"  Category distribution: {dict(cats)}")
    dropped = len(rows) - len(kept)
    if dropped:
        print(f"  ⚠ {dropped} products skipped (missing id/category or out of stock)")
    print(f"{'='*50}")


if __name__ == "__main__":
    main()
