# app/api/cars.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from app.config import get_input_path
from app.models.cars import Car, InventorySummaryOut
from scripts.ingest import MalformedRecordError, SourceUnreadableError, load_inventory
from scripts.report import format_report
from scripts.stats import cheapest, compute_summary

router = APIRouter(prefix="/cars", tags=["cars"])


def _load(file_path: str, strict: bool) -> List[Car]:
    try:
        return load_inventory(file_path, strict=strict)
    except SourceUnreadableError:
        raise HTTPException(status_code=503, detail="Stock list unavailable")
    except MalformedRecordError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/", response_model=List[Car])
def list_cars(
    strict: bool = Query(False, description="Reject the whole list on any malformed line"),
    file_path: str = Depends(get_input_path),
) -> List[Car]:
    """
    Return every car in the stock list, in file order.
    """
    return _load(file_path, strict)


@router.get("/cheapest", response_model=Car)
def get_cheapest_car(
    strict: bool = Query(False),
    file_path: str = Depends(get_input_path),
) -> Car:
    car = cheapest(_load(file_path, strict))
    if car is None:
        raise HTTPException(status_code=404, detail="No cars in stock")
    return car


@router.get("/summary", response_model=InventorySummaryOut)
def stock_summary(
    strict: bool = Query(False),
    file_path: str = Depends(get_input_path),
) -> InventorySummaryOut:
    """
    Returns the weekly report statistics, plus the formatted report lines.
    """
    summary = compute_summary(_load(file_path, strict))
    return InventorySummaryOut(
        **summary.model_dump(),
        report=format_report(summary),
    )
