"""
End-time calculation from a start date/time and a service selection.
"""

from typing import Sequence

from .durations import DurationCatalog
from .models import EndTimeEstimate
from .timeparse import combine, parse_calendar_date, parse_clock_time


class EndTimeCalculator:
    """Adds up service durations onto a start timestamp."""

    def __init__(self, durations: DurationCatalog, timezone: str = "UTC"):
        self.durations = durations
        self.timezone = timezone

    def calculate_end_time(
        self,
        start_date: str,
        start_time: str,
        service_ids: Sequence[str],
    ) -> EndTimeEstimate:
        """
        Compute when an appointment ends.

        The start is ``start_date`` at ``start_time`` in the calculator's
        timezone with seconds zeroed. Minutes are added in absolute time,
        so a late start rolls over into the next calendar day.

        Raises:
            InvalidTimeInputError: If the date or time cannot be parsed
            UnknownServiceError: In strict mode, for unknown service ids
        """
        day = parse_calendar_date(start_date)
        hour, minute = parse_clock_time(start_time)
        total = self.durations.total_minutes(service_ids)

        start = combine(day, hour, minute, self.timezone)
        end = start.add(minutes=total)

        return EndTimeEstimate(start=start, end=end, duration_minutes=total)
