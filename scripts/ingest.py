# scripts/ingest.py

import logging
import re
from typing import List, Optional, Tuple

from pydantic import ValidationError

from app.config import INPUT_PATH
from app.models.cars import Car

logger = logging.getLogger(__name__)

FILE_PATH = INPUT_PATH
EXPECTED_FIELDS = 5
DELIMITER = ","

# Plain base-10 digits only; int() alone would also accept signs, spaces and "_".
_INTEGER_RE = re.compile(r"[0-9]+")

# Largest signed 32-bit int; mileage and price never exceed it.
MAX_FIELD_VALUE = 2**31 - 1


class InventoryError(Exception):
    """Base class for stock list loading failures."""


class SourceUnreadableError(InventoryError):
    """The stock list could not be opened or read."""


class MalformedRecordError(InventoryError):
    """A stock list line did not yield a Car."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


# ---- Helpers ----

def parse_int_field(name: str, value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise MalformedRecordError(f"{name} is not an integer: {value!r}")

    # Reject long digit runs before int() sees them.
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_FIELD_VALUE)) or int(digits) > MAX_FIELD_VALUE:
        raise MalformedRecordError(f"{name} is out of range: {value[:20]!r}")
    return int(digits)


def parse_car_line(line: str, expected_fields: int = EXPECTED_FIELDS) -> Car:
    """
    Turn one stock list line into a Car.

    Fields are `registration,make,model,mileage,price`. There is no quoting
    support, so a comma inside a text field shifts the field count and the
    line is rejected.
    """
    fields = line.split(DELIMITER)
    if len(fields) != expected_fields or len(fields) < EXPECTED_FIELDS:
        raise MalformedRecordError(
            f"expected {expected_fields} fields, got {len(fields)}"
        )

    registration, make, model, mileage, price = fields[:EXPECTED_FIELDS]
    try:
        return Car(
            registration=registration,
            make=make,
            model=model,
            mileage=parse_int_field("mileage", mileage),
            price=parse_int_field("price", price),
        )
    except ValidationError as e:
        raise MalformedRecordError(str(e)) from e


def read_lines(file_path: str) -> List[str]:
    try:
        with open(file_path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadableError(f"cannot read {file_path}: {e}") from e

    # Text mode already folds "\r\n" and "\r" into "\n". Split on that alone,
    # since str.splitlines() also breaks on form feeds, "\x1c" and friends.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_stock_csv(file_path: str = FILE_PATH, strict: bool = False) -> Tuple[List[Car], dict]:
    """
    Load the stock list at `file_path`.

    The first line is a header and is always discarded. Malformed lines are
    skipped (and logged at DEBUG), or abort the load when `strict` is set.

    Returns (cars, stats).
    """
    lines = read_lines(file_path)
    cars: List[Car] = []

    n_skipped = 0
    skipped_examples = []

    seen_registrations: set[str] = set()
    duplicate_count = 0
    duplicate_examples: list[str] = []

    data_lines = lines[1:]
    for line_number, line in enumerate(data_lines, start=2):
        logger.debug("Read line %s: %r", line_number, line)

        try:
            car = parse_car_line(line)
        except MalformedRecordError as e:
            if strict:
                raise MalformedRecordError(str(e), line_number) from e

            n_skipped += 1
            logger.debug("Skipping line %s: %s", line_number, e)
            if len(skipped_examples) < 5:
                skipped_examples.append(
                    {
                        "line_number": line_number,
                        "line": line,
                        "error": str(e),
                    }
                )
            continue

        logger.debug("Accepted line %s as %s", line_number, car.registration)
        cars.append(car)

        if car.registration in seen_registrations:
            duplicate_count += 1
            if len(duplicate_examples) < 5:
                duplicate_examples.append(
                    f"Duplicate registration {car.registration!r} at line {line_number}"
                )
        else:
            seen_registrations.add(car.registration)

    stats = {
        "n_lines": len(data_lines),
        "n_cars": len(cars),
        "n_skipped": n_skipped,
        "skipped_examples": skipped_examples,
        "n_duplicate_registrations": duplicate_count,
        "duplicate_examples": duplicate_examples,
    }
    return cars, stats


def load_inventory(file_path: str = FILE_PATH, strict: bool = False) -> List[Car]:
    cars, _ = parse_stock_csv(file_path, strict=strict)
    return cars
