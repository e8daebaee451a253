# app/models/cars.py

from typing import List, Optional

from pydantic import BaseModel, Field


class Car(BaseModel):
    registration: str
    make: str
    model: str
    mileage: int = Field(ge=0, le=2**31 - 1)  # kilometers
    price: int = Field(ge=0, le=2**31 - 1)  # whole euros

    class Config:
        frozen = True
        from_attributes = True


class StockSummary(BaseModel):
    count: int
    total_value: int


class InventorySummary(BaseModel):
    average_price: float
    average_mileage: float
    cheapest: Optional[Car] = None
    count: int
    total_value: int


class InventorySummaryOut(InventorySummary):
    report: List[str]
