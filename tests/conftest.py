"""
Shared fixtures: a small catalog independent of the bundled data file.
"""

import pytest

from tintscheduler.catalog import Catalog
from tintscheduler.config import AppConfig


def build_catalog(**overrides) -> Catalog:
    data = {
        "services": [
            {"id": "1", "name": "Oil Change", "description": "Oil and filter.", "estimated_time": 30, "price": 49.99, "tags": ["maintenance"]},
            {"id": "2", "name": "Tire Rotation", "description": "Even tire wear.", "estimated_time": 20, "price": 29.99, "tags": ["maintenance", "tires"]},
            {"id": "5", "name": "AC Service", "description": "Air conditioning recharge.", "estimated_time": 60, "price": 89.99, "tags": ["comfort"]},
        ],
        "packages": [
            {
                "id": "1",
                "name": "Basic Package",
                "description": "Essential maintenance.",
                "services": [
                    {"service_id": "1", "is_included": True},
                    {"service_id": "2", "is_included": True},
                    {"service_id": "5", "is_included": False},
                ],
                "total_price": 69.99,
                "estimated_time": 50,
                "tags": ["maintenance", "value"],
            },
        ],
        "tags": ["maintenance", "tires", "comfort", "value"],
        "technicians": [
            {
                "id": "1",
                "name": "John Smith",
                "specialties": ["oil change"],
                "availability": {
                    "monday": {"start": "08:00", "end": "16:00"},
                    "tuesday": {"start": "08:00", "end": "16:00"},
                    "wednesday": {"start": "08:00", "end": "16:00"},
                    "thursday": {"start": "08:00", "end": "16:00"},
                    "friday": {"start": "08:00", "end": "16:00"},
                    "saturday": {"start": "10:00", "end": "14:00"},
                    "sunday": {"start": "", "end": ""},
                },
            },
            {
                "id": "2",
                "name": "Jane Doe",
                "specialties": ["electrical"],
                "availability": {
                    "monday": {"start": "09:30", "end": "17:45"},
                    "sunday": {"start": "10:00", "end": "14:00"},
                },
            },
        ],
        "vehicles": {
            "years": ["2022", "2023"],
            "makes": [
                {"name": "Toyota", "years": ["2022", "2023"]},
                {"name": "Ford", "years": ["2023"]},
            ],
            "models": [
                {"name": "Corolla", "make": "Toyota", "years": ["2022", "2023"]},
                {"name": "Camry", "make": "Toyota", "years": ["2023"]},
                {"name": "Mustang", "make": "Ford", "years": ["2023"]},
            ],
            "types": ["Sedan", "SUV"],
        },
    }
    data.update(overrides)
    return Catalog(**data)


@pytest.fixture
def catalog() -> Catalog:
    return build_catalog()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(timezone="UTC")
