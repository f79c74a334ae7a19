"""
Domain error types.

Raised by the core components and left for the caller to present.
None of them is retried internally.
"""

from __future__ import annotations


class SalonError(Exception):
    """Base class for domain errors."""


class ValidationError(SalonError):
    """A required field is missing or invalid."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class NotFoundError(SalonError):
    """No customer exists with the given id."""

    def __init__(self, customer_id: str) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer not found: {customer_id}")


class EmptyDataError(SalonError):
    """An export was requested with nothing to export."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"Nothing to export: {what}")
