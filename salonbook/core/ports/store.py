"""
Customer store interface.

Protocol-based interface to whatever backend keeps the customer
records. Implementations: in-memory (tests/dev), SQLite.

The backend assigns ids on create. Backend failures surface as
BackendError and are never reinterpreted by the core.
"""

from __future__ import annotations

from typing import Protocol

from salonbook.domain.entities import Customer, CustomerCandidate, VisitRecord


class CustomerStorePort(Protocol):
    """
    Repository for customer records.

    Invariants:
    - create() returns a customer with visit_count 0 and empty history
    - list_all() returns records in creation order
    """

    def create(self, candidate: CustomerCandidate) -> Customer:
        """Store a new customer and return it with its assigned id."""
        ...

    def get(self, customer_id: str) -> Customer | None:
        """Get customer by id, or None."""
        ...

    def update_visits(
        self,
        customer_id: str,
        visit_count: int,
        history: tuple[VisitRecord, ...],
    ) -> None:
        """Overwrite the visit fields of an existing customer."""
        ...

    def delete(self, customer_id: str) -> None:
        """Delete customer and its history."""
        ...

    def list_all(self) -> list[Customer]:
        """List every customer."""
        ...


class BackendError(Exception):
    """Raised by store adapters when the backend fails (I/O, permission, ...)."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        msg = f"Backend failure during {operation}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
