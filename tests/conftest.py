"""
Shared pytest fixtures for the stock report tests.
"""

import pytest

from app.models.cars import Car

HEADER = "Registration,Make,Model,Mileage,Price"


@pytest.fixture
def write_stock(tmp_path):
    """Write a stock list (header plus the given lines) and return its path."""
    def _write(*lines, header=HEADER, name="stock.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def example_cars():
    return [
        Car(registration="REG1", make="Toyota", model="Corolla", mileage=50000, price=12000),
        Car(registration="REG2", make="Ford", model="Fiesta", mileage=30000, price=9000),
    ]
