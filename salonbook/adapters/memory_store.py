"""
In-memory customer store.

Dict-backed implementation of CustomerStorePort for development and
tests. Keeps creation order.
"""

from __future__ import annotations

import logging
from uuid import uuid4

from salonbook.adapters.clock import SystemClock
from salonbook.core.ports.clock import ClockPort
from salonbook.domain.entities import Customer, CustomerCandidate, VisitRecord

logger = logging.getLogger(__name__)


class InMemoryCustomerStore:
    def __init__(self, clock: ClockPort | None = None) -> None:
        self._customers: dict[str, Customer] = {}
        self._clock = clock or SystemClock()

    def create(self, candidate: CustomerCandidate) -> Customer:
        customer = Customer(
            id=uuid4().hex,
            name=candidate.name,
            kana=candidate.kana or "",
            phone=candidate.phone,
            email=candidate.email,
            created_at=self._clock.now(),
        )
        self._customers[customer.id] = customer
        logger.debug("Created customer %s", customer.id)
        return customer

    def get(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def update_visits(
        self,
        customer_id: str,
        visit_count: int,
        history: tuple[VisitRecord, ...],
    ) -> None:
        current = self._customers.get(customer_id)
        if current is None:
            # Mirrors a document store: updating a missing record is a no-op
            logger.warning("update_visits on missing customer %s", customer_id)
            return
        self._customers[customer_id] = current.model_copy(
            update={"visit_count": visit_count, "history": tuple(history)}
        )

    def delete(self, customer_id: str) -> None:
        self._customers.pop(customer_id, None)

    def list_all(self) -> list[Customer]:
        return list(self._customers.values())
