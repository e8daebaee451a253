# parse_data.py
"""
Parse the dealership stock list and print loader stats.

Usage:
    python parse_data.py [path/to/stock.csv]
"""

import logging
import sys

from app.config import DEBUG, STRICT
from scripts.ingest import FILE_PATH, InventoryError, parse_stock_csv

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    file_path = args[0] if args else FILE_PATH

    try:
        cars, stats = parse_stock_csv(file_path, strict=STRICT)
    except InventoryError as e:
        logger.error("Unable to load stock list: %s", e)
        return 1

    print(f"Data lines read:       {stats['n_lines']}")
    print(f"Cars parsed:           {stats['n_cars']}")
    print(f"Lines skipped:         {stats['n_skipped']}")
    print(f"Duplicate registrations: {stats['n_duplicate_registrations']}")

    if stats["skipped_examples"]:
        print("\nExample skipped lines:")
        for ex in stats["skipped_examples"]:
            print(f"- Line {ex['line_number']}: {ex['error']}")

    for example in stats["duplicate_examples"]:
        print(f"- {example}")

    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    sys.exit(main())
