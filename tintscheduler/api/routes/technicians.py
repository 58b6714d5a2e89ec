"""Technician router - roster and availability windows"""

from fastapi import APIRouter, Depends, Query

from ...services.catalog_queries import CatalogService
from ...services.scheduling import SchedulingService
from ..dependencies import get_catalog_service, get_scheduling_service
from ..schemas import AvailabilityWindowResponse, TechnicianResponse

router = APIRouter(prefix="/technicians", tags=["technicians"])


@router.get("", response_model=list[TechnicianResponse])
def list_technicians(catalog: CatalogService = Depends(get_catalog_service)):
    """Get list of technicians with their weekly availability"""
    return [TechnicianResponse.from_technician(t) for t in catalog.list_technicians()]


@router.get("/{technician_id}/availability", response_model=list[AvailabilityWindowResponse])
def get_technician_availability(
    technician_id: str,
    startDate: str = Query(..., description="Start date (YYYY-MM-DD)"),
    endDate: str = Query(..., description="End date (YYYY-MM-DD), inclusive"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Get technician availability for a date range"""
    windows = service.technician_availability(technician_id, startDate, endDate)
    return [AvailabilityWindowResponse.from_window(w) for w in windows]
