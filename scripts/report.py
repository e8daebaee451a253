# scripts/report.py

import logging
import sys
from typing import List, Optional, TextIO

from app.config import REPORT_PATH
from app.models.cars import Car, InventorySummary

logger = logging.getLogger(__name__)

REPORT_TITLE = "Car Stock – Weekly Report"
CURRENCY = "€"
DISTANCE_UNIT = "km"


def format_number(value: float) -> str:
    # 40000.0 -> "40000", 40000.5 -> "40000.5"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_car(car: Car) -> str:
    return (
        f"Registration: {car.registration} Make: {car.make} "
        f"Model: {car.model} Mileage: {car.mileage} Price: {car.price}"
    )


def format_cheapest(car: Optional[Car]) -> str:
    if car is None:
        return "Cheapest car is: none"
    return (
        f"Cheapest car is: {car.registration} {car.make} {car.model} "
        f"at {CURRENCY}{car.price}"
    )


def format_report(summary: InventorySummary) -> List[str]:
    """
    The six report lines, in their fixed order.

    Money is always shown with two decimals. The total stays an exact
    integer, so its decimals are always "00".
    """
    return [
        REPORT_TITLE,
        f"The average price: {CURRENCY}{summary.average_price:.2f}",
        f"The average mileage: {format_number(summary.average_mileage)}{DISTANCE_UNIT}",
        format_cheapest(summary.cheapest),
        f"The total amount of cars is: {summary.count}",
        f"The total value of all cars is: {CURRENCY}{summary.total_value:d}.00",
    ]


def write_report_file(lines: List[str], file_path: str = REPORT_PATH) -> bool:
    """
    Overwrite `file_path` with the report.

    A write failure is logged and reported through the return value; it never
    aborts the run.
    """
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        logger.error("Unable to write to file due to:\n%s", e)
        return False

    logger.debug("Report written to %s", file_path)
    return True


def write_console(
    summary: InventorySummary,
    cars: List[Car],
    verbose: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    out = stream if stream is not None else sys.stdout

    if verbose:
        print(f"The total amount of cars is: {len(cars)}", file=out)
        for car in cars:
            print(format_car(car), file=out)

    for line in format_report(summary):
        print(line, file=out)
