"""
Ledger component - Visit recording.

Shell Layer - loads the customer, applies the pure ledger rules and
persists the result through the store port.
"""

from __future__ import annotations

from salonbook.domain.errors import NotFoundError

from ._impl import discount_status, record_visit
from .models import DISCOUNT_INTERVAL, DISCOUNT_PERCENT, RecordVisitInput, RecordVisitOutput
from .ports import LedgerStorePort


def run_record_visit(
    inp: RecordVisitInput,
    store: LedgerStorePort,
    *,
    interval: int = DISCOUNT_INTERVAL,
    percent: int = DISCOUNT_PERCENT,
) -> RecordVisitOutput:
    """Record a visit and persist it. Store errors propagate unchanged."""
    customer = store.get(inp.customer_id)
    if customer is None:
        raise NotFoundError(inp.customer_id)

    updated = record_visit(customer, inp.date, inp.note)
    store.update_visits(updated.id, updated.visit_count, updated.history)

    return RecordVisitOutput(
        customer=updated,
        discount=discount_status(updated, interval, percent),
    )
