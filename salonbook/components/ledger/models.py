"""
Ledger component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from salonbook.domain.entities import Customer

DISCOUNT_INTERVAL = 10
DISCOUNT_PERCENT = 10


# --- Input Models ---


@dataclass(frozen=True)
class RecordVisitInput:
    """Input for recording a visit."""

    customer_id: str
    date: str
    note: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class RecordVisitOutput:
    """Output from recording a visit."""

    customer: Customer
    discount: DiscountStatus


@dataclass(frozen=True)
class DiscountStatus:
    """
    Loyalty card state for the next visit.

    visits_remaining is None when the next visit is already discounted.
    """

    visit_count: int
    eligible: bool
    visits_remaining: int | None
    discount_percent: int
