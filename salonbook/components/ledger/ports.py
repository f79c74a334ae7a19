"""
Ledger component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from salonbook.domain.entities import Customer, VisitRecord


class LedgerStorePort(Protocol):
    """The slice of the customer store the ledger needs."""

    def get(self, customer_id: str) -> Customer | None:
        """Get customer by id."""
        ...

    def update_visits(
        self,
        customer_id: str,
        visit_count: int,
        history: tuple[VisitRecord, ...],
    ) -> None:
        """Persist visit count and history."""
        ...
