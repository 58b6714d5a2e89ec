"""
Generates candidate appointment slots for a day.

Pure domain logic: no booking store is consulted directly. Whether a slot
is actually free is delegated to a ``BookingConflictChecker``.
"""

from typing import Iterable, Iterator, Protocol, Sequence

from .durations import DurationCatalog
from .models import BusinessHours, TimeSlot
from .timeparse import format_clock, parse_calendar_date


class BookingConflictChecker(Protocol):
    """Decides whether a candidate slot collides with existing bookings."""

    def is_available(self, slot: TimeSlot) -> bool:
        """Return True when the slot can still be booked."""


class AlwaysAvailable:
    """Conflict checker that accepts every slot (no booking store yet)."""

    def is_available(self, slot: TimeSlot) -> bool:
        return True


class SlotSequence(Iterable[TimeSlot]):
    """
    Lazy slots for one date and duration.

    Every iteration walks the business window again, so the same object can
    be consumed more than once.
    """

    def __init__(self, generator: "SlotGenerator", day: str, total: int):
        self.generator = generator
        self.day = day
        self.total = total

    def __iter__(self) -> Iterator[TimeSlot]:
        return self.generator._iter_slots(self.day, self.total)


class SlotGenerator:
    """
    Produces the slots offered for a date and a selection of services.

    Every slot in the business window is tagged with the total duration of
    the selection. The generator does not check whether that duration fits
    before closing time.
    """

    def __init__(
        self,
        durations: DurationCatalog,
        business_hours: BusinessHours | None = None,
        conflict_checker: BookingConflictChecker | None = None,
    ):
        self.durations = durations
        self.business_hours = business_hours or BusinessHours()
        self.conflict_checker = conflict_checker or AlwaysAvailable()

    def available_slots(
        self,
        date: str,
        service_ids: Sequence[str],
    ) -> SlotSequence:
        """
        Available slots for ``date``.

        Args:
            date: Calendar date (YYYY-MM-DD)
            service_ids: Requested services, duplicates counted per occurrence

        Raises:
            InvalidTimeInputError: If the date cannot be parsed
            UnknownServiceError: In strict mode, for unknown service ids
        """
        day = parse_calendar_date(date).to_date_string()
        total = self.durations.total_minutes(service_ids)

        return SlotSequence(self, day, total)

    def _iter_slots(self, day: str, total: int) -> Iterator[TimeSlot]:
        for hour, minute in self.business_hours.start_times():
            slot = TimeSlot(
                date=day,
                start_time=format_clock(hour, minute),
                duration_minutes=total,
            )
            if self.conflict_checker.is_available(slot):
                yield slot
