"""
Directory component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from salonbook.domain.entities import Customer, CustomerCandidate


class DirectoryStorePort(Protocol):
    """The slice of the customer store the directory needs."""

    def create(self, candidate: CustomerCandidate) -> Customer:
        """Store a new customer; the store assigns the id."""
        ...

    def get(self, customer_id: str) -> Customer | None:
        """Get customer by id."""
        ...

    def delete(self, customer_id: str) -> None:
        """Delete customer."""
        ...

    def list_all(self) -> list[Customer]:
        """List all customers."""
        ...
