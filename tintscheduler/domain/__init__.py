"""
Domain layer - Pure scheduling logic without external dependencies.
"""

from .availability import AvailabilityExpander, WindowSequence
from .durations import DurationCatalog
from .end_time import EndTimeCalculator
from .models import (
    AvailabilityWindow,
    BusinessHours,
    DayHours,
    EndTimeEstimate,
    TechnicianCalendar,
    TimeSlot,
)
from .slot_generator import AlwaysAvailable, BookingConflictChecker, SlotGenerator, SlotSequence

__all__ = [
    "AlwaysAvailable",
    "AvailabilityExpander",
    "AvailabilityWindow",
    "BookingConflictChecker",
    "BusinessHours",
    "DayHours",
    "DurationCatalog",
    "EndTimeCalculator",
    "EndTimeEstimate",
    "SlotGenerator",
    "SlotSequence",
    "TechnicianCalendar",
    "TimeSlot",
    "WindowSequence",
]
