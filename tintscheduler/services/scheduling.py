"""
Application service for slot, end-time and availability requests.

The service wires the catalog into the domain components and adds the
request-level concerns around them: splitting comma-joined id lists,
logging, and materialising the lazy domain sequences for callers.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..catalog import Catalog
from ..config import AppConfig
from ..domain.availability import AvailabilityExpander
from ..domain.durations import DurationCatalog
from ..domain.end_time import EndTimeCalculator
from ..domain.models import AvailabilityWindow, EndTimeEstimate, TimeSlot
from ..domain.slot_generator import BookingConflictChecker, SlotGenerator

logger = logging.getLogger(__name__)


def split_service_ids(raw: Optional[str]) -> List[str]:
    """
    Split a comma-joined list of service ids.

    Whitespace around ids is dropped, as are empty entries, so ``None``,
    ``""`` and ``","`` all mean "no services".
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


class SchedulingService:
    """
    Orchestrates the duration catalog, slot generator, end-time calculator
    and availability expander.

    Components are injected so tests can swap in fixtures or a real
    booking conflict checker.
    """

    def __init__(
        self,
        durations: DurationCatalog,
        slot_generator: SlotGenerator,
        end_time_calculator: EndTimeCalculator,
        availability_expander: AvailabilityExpander,
    ) -> None:
        self._durations = durations
        self._slot_generator = slot_generator
        self._end_time_calculator = end_time_calculator
        self._availability_expander = availability_expander

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        catalog: Catalog,
        conflict_checker: BookingConflictChecker | None = None,
    ) -> "SchedulingService":
        """Build the service and its components from configuration."""
        durations = DurationCatalog(
            catalog.durations(),
            strict=config.strict_service_ids,
        )
        return cls(
            durations=durations,
            slot_generator=SlotGenerator(
                durations,
                business_hours=config.business_hours.to_business_hours(),
                conflict_checker=conflict_checker,
            ),
            end_time_calculator=EndTimeCalculator(durations, timezone=config.timezone),
            availability_expander=AvailabilityExpander(
                catalog.roster(),
                strict_minutes=config.strict_availability_minutes,
            ),
        )

    def available_slots(self, date: str, service_ids: Sequence[str]) -> List[TimeSlot]:
        """Available slots for a date and service selection."""
        self._warn_unknown(service_ids)
        slots = list(self._slot_generator.available_slots(date, service_ids))
        logger.debug("Generated %d slots for %s (services=%s)", len(slots), date, list(service_ids))
        return slots

    def calculate_end_time(
        self,
        start_date: str,
        start_time: str,
        service_ids: Sequence[str],
    ) -> EndTimeEstimate:
        """End time for services starting at a given date and time."""
        self._warn_unknown(service_ids)
        estimate = self._end_time_calculator.calculate_end_time(
            start_date,
            start_time,
            service_ids,
        )
        logger.debug(
            "Estimated %s -> %s (%d min)",
            estimate.start.to_iso8601_string(),
            estimate.end.to_iso8601_string(),
            estimate.duration_minutes,
        )
        return estimate

    def technician_availability(
        self,
        technician_id: str,
        start_date: str,
        end_date: str,
    ) -> List[AvailabilityWindow]:
        """Hourly availability windows for a technician over a date range."""
        windows = list(
            self._availability_expander.availability(technician_id, start_date, end_date)
        )
        logger.debug(
            "Technician %s has %d windows between %s and %s",
            technician_id,
            len(windows),
            start_date,
            end_date,
        )
        return windows

    def _warn_unknown(self, service_ids: Sequence[str]) -> None:
        # Strict mode raises inside the domain; lenient mode only logs
        if self._durations.strict:
            return
        unknown = self._durations.unknown_ids(service_ids)
        if unknown:
            logger.warning("Ignoring unknown service id(s): %s", ", ".join(unknown))
