"""
Reference data: services, packages, technicians and vehicle lookups.

The catalog is read once from YAML and never mutated afterwards.
"""

from pathlib import Path
from typing import Dict, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .domain.models import DayHours, TechnicianCalendar
from .domain.timeparse import WEEKDAY_NAMES, parse_clock_time
from .domain.exceptions import InvalidTimeInputError

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


class CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Service(CatalogModel):
    """A single billable task with a fixed estimated duration."""
    id: str
    name: str
    description: str = ""
    price: float = 0.0
    estimated_time: int = Field(ge=0)  # minutes
    tags: List[str] = Field(default_factory=list)
    is_active: bool = True


class PackageService(CatalogModel):
    service_id: str
    is_included: bool = True


class ServicePackage(CatalogModel):
    """A named bundle of services with a combined price."""
    id: str
    name: str
    description: str = ""
    services: List[PackageService] = Field(default_factory=list)
    total_price: float = 0.0
    estimated_time: int = Field(default=0, ge=0)
    tags: List[str] = Field(default_factory=list)
    is_active: bool = True


class WorkingDay(CatalogModel):
    """Working interval for one weekday; empty strings mean a day off."""
    start: str = ""
    end: str = ""

    @field_validator("start", "end")
    @classmethod
    def validate_clock(cls, value: str) -> str:
        """Accept an empty string or an HH:MM time."""
        if value:
            try:
                parse_clock_time(value)
            except InvalidTimeInputError as exc:
                raise ValueError(str(exc)) from exc
        return value


class Technician(CatalogModel):
    """Technician profile with weekly working hours."""
    id: str
    name: str
    email: str = ""
    phone: str = ""
    specialties: List[str] = Field(default_factory=list)
    availability: Dict[str, WorkingDay] = Field(default_factory=dict)
    is_active: bool = True

    @field_validator("availability")
    @classmethod
    def validate_weekdays(cls, value: Dict[str, WorkingDay]) -> Dict[str, WorkingDay]:
        """Normalise weekday keys and fill missing days as days off."""
        normalized: Dict[str, WorkingDay] = {}
        for day, hours in value.items():
            key = day.lower()
            if key not in WEEKDAY_NAMES:
                raise ValueError(f"Unknown weekday in availability: {day!r}")
            normalized[key] = hours

        # Keep the weekly schedule ordered Sunday..Saturday
        ordered = ("sunday",) + WEEKDAY_NAMES[:-1]
        return {day: normalized.get(day, WorkingDay()) for day in ordered}

    def to_calendar(self) -> TechnicianCalendar:
        """Convert to the domain-level weekly calendar."""
        return TechnicianCalendar(
            technician_id=self.id,
            name=self.name,
            weekly={
                day: DayHours(start=hours.start, end=hours.end)
                for day, hours in self.availability.items()
            },
        )


class VehicleMake(CatalogModel):
    name: str
    years: List[str] = Field(default_factory=list)


class VehicleModel(CatalogModel):
    name: str
    make: str
    years: List[str] = Field(default_factory=list)


class VehicleCatalog(CatalogModel):
    years: List[str] = Field(default_factory=list)
    makes: List[VehicleMake] = Field(default_factory=list)
    models: List[VehicleModel] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)


def _ensure_unique(ids: List[str], kind: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate {kind} id detected: {item_id}")
        seen.add(item_id)


class Catalog(CatalogModel):
    """All static reference data the scheduling backend works from."""
    services: List[Service] = Field(default_factory=list)
    packages: List[ServicePackage] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    technicians: List[Technician] = Field(default_factory=list)
    vehicles: VehicleCatalog = Field(default_factory=VehicleCatalog)

    @model_validator(mode="after")
    def validate_references(self) -> "Catalog":
        """Ensure ids are unique and packages only reference known services."""
        _ensure_unique([s.id for s in self.services], "service")
        _ensure_unique([p.id for p in self.packages], "package")
        _ensure_unique([t.id for t in self.technicians], "technician")

        known = {s.id for s in self.services}
        for package in self.packages:
            missing = [ref.service_id for ref in package.services if ref.service_id not in known]
            if missing:
                raise ValueError(
                    f"Package {package.id} references unknown service(s): {', '.join(missing)}"
                )
        return self

    @classmethod
    def load_from_yaml(cls, catalog_path: Path) -> "Catalog":
        """
        Load the catalog from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML or its contents are invalid
        """
        if not catalog_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

        try:
            with open(catalog_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {catalog_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Catalog file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load_default(cls) -> "Catalog":
        """Load the catalog bundled with the package."""
        return cls.load_from_yaml(DEFAULT_CATALOG_PATH)

    def durations(self) -> Dict[str, int]:
        """Service id -> estimated minutes."""
        return {service.id: service.estimated_time for service in self.services}

    def roster(self) -> Dict[str, TechnicianCalendar]:
        """Technician id -> weekly calendar."""
        return {tech.id: tech.to_calendar() for tech in self.technicians}

    def find_service(self, service_id: str) -> Service | None:
        for service in self.services:
            if service.id == service_id:
                return service
        return None

    def find_package(self, package_id: str) -> ServicePackage | None:
        for package in self.packages:
            if package.id == package_id:
                return package
        return None
