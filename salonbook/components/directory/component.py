"""
Directory component - Customer collection.

Holds the latest snapshot of customers and routes writes to the store.
The caller owns any subscription to the backing collection and feeds
snapshots in through refresh().

Shell Layer - store calls happen here; the transformations live in _impl.
"""

from __future__ import annotations

from collections.abc import Iterable

from salonbook.domain.entities import Customer, CustomerCandidate
from salonbook.domain.errors import NotFoundError

from ._impl import filter_customers, group_by_phonetic_row, validate_candidate
from .models import GroupedCustomers
from .ports import DirectoryStorePort


class Directory:
    """
    Customer directory.

    Store errors (BackendError) pass through unchanged.
    """

    def __init__(self, store: DirectoryStorePort) -> None:
        self._store = store
        self._customers: tuple[Customer, ...] = ()

    @property
    def customers(self) -> tuple[Customer, ...]:
        return self._customers

    def refresh(self, snapshot: Iterable[Customer] | None = None) -> tuple[Customer, ...]:
        """Replace the held customers with snapshot, or pull from the store."""
        if snapshot is None:
            snapshot = self._store.list_all()
        self._customers = tuple(snapshot)
        return self._customers

    def add(self, candidate: CustomerCandidate) -> Customer:
        validate_candidate(candidate)

        normalized = candidate.model_copy(update={"kana": candidate.kana or ""})
        customer = self._store.create(normalized)
        self._customers = (*self._customers, customer)
        return customer

    def get(self, customer_id: str) -> Customer:
        customer = self._store.get(customer_id)
        if customer is None:
            raise NotFoundError(customer_id)
        return customer

    def remove(self, customer_id: str) -> None:
        """
        Delete a customer and its history. Irreversible.

        Callers must have explicit confirmation before calling this.
        """
        if self._store.get(customer_id) is None:
            raise NotFoundError(customer_id)

        self._store.delete(customer_id)
        self._customers = tuple(c for c in self._customers if c.id != customer_id)

    def filter(
        self, term: str, customers: Iterable[Customer] | None = None
    ) -> tuple[Customer, ...]:
        return filter_customers(self._customers if customers is None else customers, term)

    def group_by_phonetic_row(
        self, customers: Iterable[Customer] | None = None
    ) -> GroupedCustomers:
        return group_by_phonetic_row(self._customers if customers is None else customers)
