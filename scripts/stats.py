# scripts/stats.py
"""
Summary statistics over a loaded inventory. Everything here is pure.
"""

from typing import Callable, List, Optional

from app.models.cars import Car, InventorySummary, StockSummary


def average_of(cars: List[Car], selector: Callable[[Car], int]) -> float:
    """
    Mean of selector(car) across `cars`, computed in float.

    An empty inventory averages to 0.
    """
    if not cars:
        return 0.0
    return sum(float(selector(car)) for car in cars) / len(cars)


def cheapest(cars: List[Car]) -> Optional[Car]:
    """
    The car with the lowest price, or None for an empty inventory.

    A later car only replaces the current pick if it is strictly cheaper,
    so ties resolve to the earliest one.
    """
    if not cars:
        return None

    best = cars[0]
    for car in cars[1:]:
        if car.price < best.price:
            best = car
    return best


def summarize(cars: List[Car]) -> StockSummary:
    if not cars:
        return StockSummary(count=0, total_value=0)
    return StockSummary(
        count=len(cars),
        total_value=sum(car.price for car in cars),
    )


def compute_summary(cars: List[Car]) -> InventorySummary:
    stock = summarize(cars)
    return InventorySummary(
        average_price=average_of(cars, lambda car: car.price),
        average_mileage=average_of(cars, lambda car: car.mileage),
        cheapest=cheapest(cars),
        count=stock.count,
        total_value=stock.total_value,
    )
