"""
Duration catalog: service id -> estimated minutes.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping

from .exceptions import UnknownServiceError


class DurationCatalog:
    """
    Read-only lookup of estimated service durations.

    Totals are computed per occurrence, so a service listed twice counts
    twice. Unknown ids contribute zero unless ``strict`` is set, in which
    case they raise ``UnknownServiceError``.
    """

    def __init__(self, durations: Mapping[str, int], strict: bool = False):
        for service_id, minutes in durations.items():
            if minutes < 0:
                raise ValueError(
                    f"Duration for service {service_id!r} must be non-negative, got {minutes}"
                )
        self._durations = MappingProxyType(dict(durations))
        self.strict = strict

    def __contains__(self, service_id: str) -> bool:
        return service_id in self._durations

    def __len__(self) -> int:
        return len(self._durations)

    def duration_of(self, service_id: str) -> int:
        """Minutes for a single service, 0 if it is unknown."""
        return self._durations.get(service_id, 0)

    def unknown_ids(self, service_ids: Iterable[str]) -> List[str]:
        """Ids not present in the catalog, in request order without repeats."""
        unknown: List[str] = []
        for service_id in service_ids:
            if service_id not in self._durations and service_id not in unknown:
                unknown.append(service_id)
        return unknown

    def total_minutes(self, service_ids: Iterable[str]) -> int:
        """Sum of durations for a selection of services."""
        selection = list(service_ids)

        if self.strict:
            unknown = self.unknown_ids(selection)
            if unknown:
                raise UnknownServiceError(unknown)

        return sum(self.duration_of(service_id) for service_id in selection)
