"""Response schemas for the HTTP API (camelCase keys, as the frontend expects)"""

from typing import Dict, List

from pydantic import BaseModel

from ..catalog import Service, ServicePackage, Technician
from ..domain.models import AvailabilityWindow, EndTimeEstimate, TimeSlot


class TimeSlotResponse(BaseModel):
    date: str
    startTime: str
    durationMinutes: int

    @classmethod
    def from_slot(cls, slot: TimeSlot) -> "TimeSlotResponse":
        return cls(
            date=slot.date,
            startTime=slot.start_time,
            durationMinutes=slot.duration_minutes,
        )


class EndTimeResponse(BaseModel):
    startDateTime: str
    endDateTime: str
    durationMinutes: int

    @classmethod
    def from_estimate(cls, estimate: EndTimeEstimate) -> "EndTimeResponse":
        return cls(
            startDateTime=estimate.start.to_iso8601_string(),
            endDateTime=estimate.end.to_iso8601_string(),
            durationMinutes=estimate.duration_minutes,
        )


class AvailabilityWindowResponse(BaseModel):
    date: str
    startTime: str
    endTime: str
    technicianId: str
    technicianName: str

    @classmethod
    def from_window(cls, window: AvailabilityWindow) -> "AvailabilityWindowResponse":
        return cls(
            date=window.date,
            startTime=window.start_time,
            endTime=window.end_time,
            technicianId=window.technician_id,
            technicianName=window.technician_name,
        )


class WorkingDayResponse(BaseModel):
    start: str
    end: str


class TechnicianResponse(BaseModel):
    id: str
    name: str
    specialties: List[str]
    availability: Dict[str, WorkingDayResponse]

    @classmethod
    def from_technician(cls, tech: Technician) -> "TechnicianResponse":
        return cls(
            id=tech.id,
            name=tech.name,
            specialties=list(tech.specialties),
            availability={
                day: WorkingDayResponse(start=hours.start, end=hours.end)
                for day, hours in tech.availability.items()
            },
        )


class ServiceResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    estimatedTime: int
    tags: List[str]

    @classmethod
    def from_service(cls, service: Service) -> "ServiceResponse":
        return cls(
            id=service.id,
            name=service.name,
            description=service.description,
            price=service.price,
            estimatedTime=service.estimated_time,
            tags=list(service.tags),
        )


class PackageServiceSummary(BaseModel):
    id: str
    name: str
    price: float
    estimatedTime: int


class PackageServiceDetail(ServiceResponse):
    isIncluded: bool


class PackageResponse(BaseModel):
    id: str
    name: str
    description: str
    totalPrice: float
    estimatedTime: int
    tags: List[str]
    services: List[PackageServiceSummary]

    @classmethod
    def from_package(cls, package: ServicePackage, services: List[Service]) -> "PackageResponse":
        return cls(
            id=package.id,
            name=package.name,
            description=package.description,
            totalPrice=package.total_price,
            estimatedTime=package.estimated_time,
            tags=list(package.tags),
            services=[
                PackageServiceSummary(
                    id=s.id,
                    name=s.name,
                    price=s.price,
                    estimatedTime=s.estimated_time,
                )
                for s in services
            ],
        )


class PackageDetailResponse(BaseModel):
    id: str
    name: str
    description: str
    totalPrice: float
    estimatedTime: int
    tags: List[str]
    services: List[PackageServiceDetail]
