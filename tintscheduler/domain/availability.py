"""
Expands technicians' weekly calendars into hourly availability windows.
"""

from typing import Iterable, Iterator, Mapping

from pendulum import Date

from .exceptions import InvalidTimeInputError, NotFoundError
from .models import AvailabilityWindow, TechnicianCalendar
from .timeparse import parse_calendar_date, weekday_name


class WindowSequence(Iterable[AvailabilityWindow]):
    """Lazy windows for one technician and date range, restartable."""

    def __init__(
        self,
        expander: "AvailabilityExpander",
        calendar: TechnicianCalendar,
        start: Date,
        end: Date,
    ):
        self.expander = expander
        self.calendar = calendar
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[AvailabilityWindow]:
        return self.expander._iter_windows(self.calendar, self.start, self.end)


class AvailabilityExpander:
    """
    Turns a weekly schedule into concrete one-hour windows over a date range.

    Algorithm:
    1. Resolve the technician from the roster
    2. Walk every day from start to end (inclusive)
    3. Look up that weekday's working hours
    4. Emit one window per whole hour inside the interval

    With ``strict_minutes`` a roster entry whose hours are not on the top of
    the hour is rejected up front instead of being truncated.
    """

    def __init__(
        self,
        roster: Mapping[str, TechnicianCalendar],
        strict_minutes: bool = False,
    ):
        self.roster = dict(roster)
        self.strict_minutes = strict_minutes

        if strict_minutes:
            self._check_whole_hours()

    def _check_whole_hours(self) -> None:
        for calendar in self.roster.values():
            for weekday, hours in calendar.weekly.items():
                if hours.has_partial_hours():
                    raise InvalidTimeInputError(
                        f"Technician {calendar.technician_id} has non-hourly "
                        f"hours on {weekday}: {hours.start}-{hours.end}"
                    )

    def get_calendar(self, technician_id: str) -> TechnicianCalendar:
        calendar = self.roster.get(technician_id)
        if calendar is None:
            raise NotFoundError(f"Technician with ID {technician_id} not found")
        return calendar

    def availability(
        self,
        technician_id: str,
        start_date: str,
        end_date: str,
    ) -> WindowSequence:
        """
        Hourly windows for a technician between two dates.

        The result is lazy and can be iterated repeatedly; order is by day,
        then by hour.

        Raises:
            NotFoundError: If the technician is not in the roster
            InvalidTimeInputError: If either date cannot be parsed
        """
        calendar = self.get_calendar(technician_id)
        start = parse_calendar_date(start_date)
        end = parse_calendar_date(end_date)

        return WindowSequence(self, calendar, start, end)

    def _iter_windows(
        self,
        calendar: TechnicianCalendar,
        start: Date,
        end: Date,
    ) -> Iterator[AvailabilityWindow]:
        current = start

        while current <= end:
            hours = calendar.hours_for(weekday_name(current))
            day = current.to_date_string()

            for hour in hours.hour_range():
                yield calendar.window_at(day, hour)

            current = current.add(days=1)
