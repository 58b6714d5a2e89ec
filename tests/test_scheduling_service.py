"""
Tests for the SchedulingService orchestration layer.
"""

import logging

import pytest

from tintscheduler.config import AppConfig
from tintscheduler.domain.exceptions import InvalidTimeInputError, UnknownServiceError
from tintscheduler.domain.models import TimeSlot
from tintscheduler.services.scheduling import SchedulingService, split_service_ids


class BookedAt:
    """Stub conflict checker with a fixed set of booked start times."""

    def __init__(self, *booked: str):
        self.booked = set(booked)

    def is_available(self, slot: TimeSlot) -> bool:
        return slot.start_time not in self.booked


def test_split_service_ids():
    """Comma-joined ids are split, trimmed and stripped of empties."""
    assert split_service_ids(None) == []
    assert split_service_ids("") == []
    assert split_service_ids(",") == []
    assert split_service_ids("1,2") == ["1", "2"]
    assert split_service_ids(" 1 , 2,,1 ") == ["1", "2", "1"]


def test_available_slots_uses_catalog_durations(config, catalog):
    service = SchedulingService.from_config(config, catalog)

    slots = service.available_slots("2024-06-01", ["1", "2"])

    assert len(slots) == 18
    assert slots[0].duration_minutes == 50


def test_conflict_checker_is_pluggable(config, catalog):
    """A conflict checker passed to from_config removes booked slots."""
    service = SchedulingService.from_config(config, catalog, conflict_checker=BookedAt("08:00", "10:30"))

    starts = [slot.start_time for slot in service.available_slots("2024-06-01", ["1"])]

    assert len(starts) == 16
    assert "08:00" not in starts
    assert "10:30" not in starts


def test_business_hours_from_config(catalog):
    config = AppConfig(business_hours={"open_hour": 10, "close_hour": 12, "slot_interval_minutes": 15})
    service = SchedulingService.from_config(config, catalog)

    slots = service.available_slots("2024-06-01", [])

    assert [slot.start_time for slot in slots][:3] == ["10:00", "10:15", "10:30"]
    assert len(slots) == 8


def test_unknown_services_are_logged(config, catalog, caplog):
    """Lenient mode skips unknown ids and logs a warning."""
    service = SchedulingService.from_config(config, catalog)

    with caplog.at_level(logging.WARNING, logger="tintscheduler.services.scheduling"):
        estimate = service.calculate_end_time("2024-06-01", "09:00", ["1", "ghost"])

    assert estimate.duration_minutes == 30
    assert "ghost" in caplog.text


def test_strict_service_ids_from_config(catalog):
    config = AppConfig(strict_service_ids=True)
    service = SchedulingService.from_config(config, catalog)

    with pytest.raises(UnknownServiceError):
        service.available_slots("2024-06-01", ["ghost"])


def test_strict_availability_minutes_from_config(catalog):
    """The test catalog has a 09:30 start, which strict mode rejects."""
    config = AppConfig(strict_availability_minutes=True)

    with pytest.raises(InvalidTimeInputError):
        SchedulingService.from_config(config, catalog)


def test_technician_availability_returns_list(config, catalog):
    service = SchedulingService.from_config(config, catalog)

    windows = service.technician_availability("1", "2024-06-03", "2024-06-04")

    assert isinstance(windows, list)
    assert len(windows) == 16


def test_end_time_in_configured_timezone(catalog):
    config = AppConfig(timezone="Europe/Berlin")
    service = SchedulingService.from_config(config, catalog)

    estimate = service.calculate_end_time("2024-06-01", "09:00", ["5"])

    assert estimate.end.to_iso8601_string() == "2024-06-01T10:00:00+02:00"
