"""
Domain models for slots, end-time estimates and technician availability.
"""

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Tuple

from pendulum import DateTime

from .timeparse import format_clock, parse_clock_time


@dataclass(frozen=True)
class TimeSlot:
    """A candidate appointment start time on a given date."""
    date: str
    start_time: str
    duration_minutes: int


@dataclass(frozen=True)
class AvailabilityWindow:
    """An hour-long block during which a technician is nominally free."""
    date: str
    start_time: str
    end_time: str
    technician_id: str
    technician_name: str


@dataclass(frozen=True)
class EndTimeEstimate:
    """
    Start and end of an appointment computed from service durations.

    Invariant: end - start == duration_minutes.
    """
    start: DateTime
    end: DateTime
    duration_minutes: int


@dataclass(frozen=True)
class BusinessHours:
    """
    Global window in which appointment slots are offered.

    ``close_hour`` is exclusive: with 8 and 17 the last slot starts at
    16:30 for a 30 minute interval.
    """
    open_hour: int = 8
    close_hour: int = 17
    slot_interval_minutes: int = 30

    def __post_init__(self):
        if not 0 <= self.open_hour < self.close_hour <= 24:
            raise ValueError(
                f"Invalid business hours {self.open_hour}-{self.close_hour}"
            )
        if self.slot_interval_minutes <= 0 or 60 % self.slot_interval_minutes:
            raise ValueError(
                f"slot_interval_minutes must divide 60, got {self.slot_interval_minutes}"
            )

    def start_times(self) -> Iterator[Tuple[int, int]]:
        """Yield every (hour, minute) a slot may start at, in order."""
        for hour in range(self.open_hour, self.close_hour):
            for minute in range(0, 60, self.slot_interval_minutes):
                yield hour, minute

    def slots_per_day(self) -> int:
        return (self.close_hour - self.open_hour) * (60 // self.slot_interval_minutes)


@dataclass(frozen=True)
class DayHours:
    """
    Working interval of a technician on one weekday.

    Empty ``start`` or ``end`` means the technician does not work that day.
    """
    start: str = ""
    end: str = ""

    def is_working_day(self) -> bool:
        return bool(self.start) and bool(self.end)

    def has_partial_hours(self) -> bool:
        """True when start or end is not on the top of the hour."""
        if not self.is_working_day():
            return False
        return parse_clock_time(self.start)[1] != 0 or parse_clock_time(self.end)[1] != 0

    def hour_range(self) -> range:
        """
        Whole hours covered by this interval.

        Minutes are truncated, so 08:30-16:45 covers hours 8..15.
        """
        if not self.is_working_day():
            return range(0)
        start_hour, _ = parse_clock_time(self.start)
        end_hour, _ = parse_clock_time(self.end)
        return range(start_hour, end_hour)


@dataclass(frozen=True)
class TechnicianCalendar:
    """A technician's identity plus their weekly working hours."""
    technician_id: str
    name: str
    weekly: Mapping[str, DayHours] = field(default_factory=dict)

    def hours_for(self, weekday: str) -> DayHours:
        """Working hours for a lowercase weekday name; a missing day is a day off."""
        return self.weekly.get(weekday, DayHours())

    def window_at(self, date: str, hour: int) -> AvailabilityWindow:
        return AvailabilityWindow(
            date=date,
            start_time=format_clock(hour),
            end_time=format_clock(hour + 1),
            technician_id=self.technician_id,
            technician_name=self.name,
        )
