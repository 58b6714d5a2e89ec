"""
Tests for the technician availability expander.
"""

import pytest

from tintscheduler.domain.availability import AvailabilityExpander
from tintscheduler.domain.exceptions import InvalidTimeInputError, NotFoundError


def _expander(catalog, strict_minutes: bool = False) -> AvailabilityExpander:
    return AvailabilityExpander(catalog.roster(), strict_minutes=strict_minutes)


class TestAvailabilityExpander:
    """Tests for AvailabilityExpander."""

    def test_sunday_off_yields_nothing(self, catalog):
        """Test that an empty Sunday entry produces no windows."""
        windows = list(_expander(catalog).availability("1", "2024-06-02", "2024-06-02"))

        assert windows == []

    def test_monday_yields_eight_hourly_windows(self, catalog):
        """Test 08:00-16:00 on a Monday."""
        windows = list(_expander(catalog).availability("1", "2024-06-03", "2024-06-03"))

        assert len(windows) == 8
        assert windows[0].start_time == "08:00"
        assert windows[0].end_time == "09:00"
        assert windows[-1].start_time == "15:00"
        assert windows[-1].end_time == "16:00"
        assert all(w.technician_id == "1" for w in windows)
        assert all(w.technician_name == "John Smith" for w in windows)

    def test_full_week(self, catalog):
        """Test a Sunday..Saturday range: 5 x 8 weekday hours plus 4 on Saturday."""
        windows = list(_expander(catalog).availability("1", "2024-06-02", "2024-06-08"))

        assert len(windows) == 44
        assert windows[0].date == "2024-06-03"
        assert windows[-1].date == "2024-06-08"
        assert windows[-1].start_time == "13:00"

    def test_every_monday_in_range(self, catalog):
        """Test that each Monday in a two-week range contributes 8 windows."""
        windows = list(_expander(catalog).availability("1", "2024-06-03", "2024-06-16"))
        mondays = [w for w in windows if w.date in ("2024-06-03", "2024-06-10")]

        assert len(mondays) == 16

    def test_order_is_day_then_hour(self, catalog):
        windows = list(_expander(catalog).availability("1", "2024-06-03", "2024-06-05"))
        keys = [(w.date, w.start_time) for w in windows]

        assert keys == sorted(keys)

    def test_end_before_start_is_empty(self, catalog):
        windows = list(_expander(catalog).availability("1", "2024-06-10", "2024-06-03"))

        assert windows == []

    def test_minutes_truncated_by_default(self, catalog):
        """Test that 09:30-17:45 is treated as hours 9..16."""
        windows = list(_expander(catalog).availability("2", "2024-06-03", "2024-06-03"))

        assert [w.start_time for w in windows][0] == "09:00"
        assert [w.end_time for w in windows][-1] == "17:00"
        assert len(windows) == 8

    def test_strict_minutes_rejects_partial_hours(self, catalog):
        """Test that strict mode refuses schedules not on the hour."""
        with pytest.raises(InvalidTimeInputError, match="non-hourly"):
            _expander(catalog, strict_minutes=True)

    def test_unknown_technician(self, catalog):
        """Test that an unknown id fails with NotFoundError."""
        with pytest.raises(NotFoundError, match="Technician with ID 99 not found"):
            _expander(catalog).availability("99", "2024-06-03", "2024-06-03")

    def test_invalid_date(self, catalog):
        with pytest.raises(InvalidTimeInputError):
            _expander(catalog).availability("1", "2024-06-03", "soon")

    def test_idempotent(self, catalog):
        """Test that identical calls give identical windows."""
        expander = _expander(catalog)

        first = expander.availability("1", "2024-06-01", "2024-06-04")
        second = expander.availability("1", "2024-06-01", "2024-06-04")

        assert list(first) == list(second)

    def test_result_can_be_iterated_twice(self, catalog):
        """Test that the same result replays its windows on every pass."""
        windows = _expander(catalog).availability("1", "2024-06-03", "2024-06-03")

        first = list(windows)
        second = list(windows)

        assert len(first) == 8
        assert first == second
