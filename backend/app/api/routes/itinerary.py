"""Itinerary endpoints - POST /itinerary/generate, /itinerary/reorder, /itinerary/move."""

import logging
import time
from datetime import date

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from backend.app.config import get_settings
from backend.app.models.itinerary import Itinerary, ItineraryDay
from backend.app.models.trip import TripLeg
from backend.app.scheduling.assembler import generate_full_itinerary
from backend.app.scheduling.editing import (
    ItineraryEditError,
    move_item_between_days,
    reorder_day_items,
)
from backend.app.utils.logging import StructuredItineraryLogger
from backend.app.utils.metrics import PrometheusItineraryMetrics

router = APIRouter(prefix="/itinerary", tags=["itinerary"])
logger = logging.getLogger(__name__)

structured_logger = StructuredItineraryLogger()
metrics = PrometheusItineraryMetrics()


class GenerateItineraryRequest(BaseModel):
    """Request body for POST /itinerary/generate."""

    legs: list[TripLeg]
    reference_date: date | None = Field(
        default=None, description="Anchor date for legs without dates"
    )


class ReorderDayRequest(BaseModel):
    """Request body for POST /itinerary/reorder."""

    day: ItineraryDay
    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)


class MoveItemRequest(BaseModel):
    """Request body for POST /itinerary/move."""

    days: list[ItineraryDay]
    from_day_index: int = Field(..., ge=0)
    to_day_index: int = Field(..., ge=0)
    item_id: str = Field(..., min_length=1)


class MoveItemResponse(BaseModel):
    """Response for POST /itinerary/move."""

    days: list[ItineraryDay]


@router.post("/generate", response_model=Itinerary)
async def generate_itinerary(request: GenerateItineraryRequest) -> Itinerary:
    """Generate the full day-by-day itinerary for a trip.

    Args:
        request: Trip legs in travel order

    Returns:
        Itinerary with days, summary, and advisories

    Raises:
        HTTPException: 400 if legs is empty or exceeds the configured maximum
    """
    settings = get_settings()

    if not request.legs:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request: legs array must not be empty",
        )
    if len(request.legs) > settings.max_legs:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid request: maximum {settings.max_legs} legs allowed",
        )

    started = time.perf_counter()
    itinerary = generate_full_itinerary(request.legs, reference_date=request.reference_date)
    latency_ms = (time.perf_counter() - started) * 1000

    metrics.record_generation(latency_ms, itinerary.total_days)
    for advisory in itinerary.advisories:
        metrics.inc_advisory(advisory.code)
    structured_logger.log_generation(itinerary, len(request.legs), latency_ms)

    return itinerary


@router.post("/reorder", response_model=ItineraryDay)
async def reorder_day(request: ReorderDayRequest) -> ItineraryDay:
    """Reorder experiences within a day and regenerate its schedule.

    Raises:
        HTTPException: 400 if an index is out of range
    """
    try:
        day = reorder_day_items(request.day, request.from_index, request.to_index)
    except ItineraryEditError as e:
        metrics.inc_edit("reorder", "rejected")
        structured_logger.log_edit("reorder", "rejected", error_reason=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    metrics.inc_edit("reorder", "success")
    structured_logger.log_edit("reorder", "success")
    return day


@router.post("/move", response_model=MoveItemResponse)
async def move_item(request: MoveItemRequest) -> MoveItemResponse:
    """Move an experience between days and regenerate both days.

    Raises:
        HTTPException: 400 if a day index is invalid or the item is not movable
    """
    try:
        days = move_item_between_days(
            request.days,
            request.from_day_index,
            request.to_day_index,
            request.item_id,
        )
    except ItineraryEditError as e:
        metrics.inc_edit("move", "rejected")
        structured_logger.log_edit("move", "rejected", error_reason=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    metrics.inc_edit("move", "success")
    structured_logger.log_edit("move", "success")
    return MoveItemResponse(days=days)
