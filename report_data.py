# report_data.py
"""
Build the weekly stock report: load the stock list, print the summary and
write it to the report file.

Usage:
    python report_data.py
    CAR_STOCK_DEBUG=1 python report_data.py   # echo lines and the car listing
"""

import logging
import sys

from app.config import DEBUG, REPORT_PATH, STRICT
from scripts.ingest import FILE_PATH, InventoryError, parse_stock_csv
from scripts.report import format_report, write_console, write_report_file
from scripts.stats import compute_summary

logger = logging.getLogger(__name__)


def run(
    file_path: str = FILE_PATH,
    report_path: str = REPORT_PATH,
    verbose: bool = DEBUG,
    strict: bool = STRICT,
) -> int:
    try:
        cars, stats = parse_stock_csv(file_path, strict=strict)
    except InventoryError as e:
        logger.error("Unable to load stock list: %s", e)
        return 1

    if stats["n_skipped"]:
        logger.debug("Skipped %s malformed line(s)", stats["n_skipped"])

    summary = compute_summary(cars)
    write_console(summary, cars, verbose=verbose)
    write_report_file(format_report(summary), report_path)
    return 0


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
