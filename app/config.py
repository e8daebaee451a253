# app/config.py
"""
Runtime settings for the stock report.

Defaults match the dealership layout; each one can be overridden from the
environment, e.g.:
    CAR_STOCK_INPUT=data/stock.csv CAR_STOCK_DEBUG=1 python report_data.py
"""

import os

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


INPUT_PATH = os.getenv("CAR_STOCK_INPUT", "resources/DealershipStockList.csv")
REPORT_PATH = os.getenv("CAR_STOCK_REPORT", "DealershipStockReport.txt")
DEBUG = _flag("CAR_STOCK_DEBUG")
STRICT = _flag("CAR_STOCK_STRICT")


def get_input_path() -> str:
    return INPUT_PATH
