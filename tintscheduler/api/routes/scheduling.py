"""Scheduling router - available slots and end-time estimates"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...services.scheduling import SchedulingService, split_service_ids
from ..dependencies import get_scheduling_service
from ..schemas import EndTimeResponse, TimeSlotResponse

router = APIRouter(prefix="/scheduling", tags=["scheduling"])


@router.get("/available-slots", response_model=list[TimeSlotResponse])
def get_available_slots(
    date: str = Query(..., description="Date (YYYY-MM-DD)"),
    serviceIds: Optional[str] = Query(None, description="Comma-separated service ids"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Get available time slots for scheduling"""
    slots = service.available_slots(date, split_service_ids(serviceIds))
    return [TimeSlotResponse.from_slot(slot) for slot in slots]


@router.get("/calculate-end-time", response_model=EndTimeResponse)
def calculate_end_time(
    startDate: str = Query(..., description="Start date (YYYY-MM-DD)"),
    startTime: str = Query(..., description="Start time (HH:MM)"),
    serviceIds: str = Query(..., description="Comma-separated service ids"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Calculate estimated end time based on services and start time"""
    estimate = service.calculate_end_time(startDate, startTime, split_service_ids(serviceIds))
    return EndTimeResponse.from_estimate(estimate)
