"""
VisitLedger - append-only visit history and the loyalty discount rule.

Functional Core - pure business logic.

Key behaviors:
- A visit is prepended to history, so history[0] is always the latest
- visit_count moves in lockstep with len(history)
- Eligibility answers "will the NEXT visit be discounted" and must be
  checked before recording, not after
"""

from __future__ import annotations

import re
from datetime import datetime

from salonbook.domain.entities import Customer, VisitRecord
from salonbook.domain.errors import ValidationError

from .models import DISCOUNT_INTERVAL, DISCOUNT_PERCENT, DiscountStatus

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# --- Validation Functions ---


def validate_visit_date(date: str) -> None:
    """Raise ValidationError unless date is a real YYYY-MM-DD calendar date."""
    if not date or not date.strip():
        raise ValidationError("date", "date is required")

    if not _DATE_PATTERN.match(date):
        raise ValidationError("date", f"'{date}' is not in YYYY-MM-DD form")

    try:
        datetime.strptime(date, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError("date", f"'{date}' is not a calendar date") from e


def _check_interval(interval: int) -> None:
    if interval < 1:
        raise ValidationError("interval", "discount interval must be at least 1")


# --- Ledger Operations ---


def record_visit(customer: Customer, date: str, note: str = "") -> Customer:
    """
    Return a copy of customer with one more visit.

    Persistence is the caller's responsibility.
    """
    validate_visit_date(date)

    record = VisitRecord(date=date, note=note or "")
    return customer.model_copy(
        update={
            "history": (record, *customer.history),
            "visit_count": customer.visit_count + 1,
        }
    )


def is_discount_eligible(customer: Customer, interval: int = DISCOUNT_INTERVAL) -> bool:
    """True when the next visit is a discount visit (10th, 20th, ...)."""
    _check_interval(interval)
    return (customer.visit_count + 1) % interval == 0


def visits_until_discount(customer: Customer, interval: int = DISCOUNT_INTERVAL) -> int:
    """
    Visits left before the discount, in [1, interval].

    Only meaningful while is_discount_eligible() is False.
    """
    _check_interval(interval)
    return interval - (customer.visit_count % interval)


def discount_status(
    customer: Customer,
    interval: int = DISCOUNT_INTERVAL,
    percent: int = DISCOUNT_PERCENT,
) -> DiscountStatus:
    eligible = is_discount_eligible(customer, interval)
    return DiscountStatus(
        visit_count=customer.visit_count,
        eligible=eligible,
        visits_remaining=None if eligible else visits_until_discount(customer, interval),
        discount_percent=percent,
    )
