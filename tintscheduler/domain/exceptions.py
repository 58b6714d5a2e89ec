"""
Domain-specific exception hierarchy for the scheduling backend.
"""


class SchedulingError(Exception):
    """Base class for all application-level errors."""


class NotFoundError(SchedulingError):
    """Raised when a technician or package id is not in the catalog."""


class InvalidTimeInputError(SchedulingError):
    """Raised when a date or time string cannot be parsed."""


class UnknownServiceError(SchedulingError):
    """Raised in strict mode when a service id is not in the duration catalog."""

    def __init__(self, service_ids):
        self.service_ids = list(service_ids)
        super().__init__(f"Unknown service id(s): {', '.join(self.service_ids)}")
