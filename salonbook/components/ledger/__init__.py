"""
Ledger component - Visit history and loyalty discount.

Owns a customer's append-only visit history and the "every tenth visit"
discount rule.
"""

from ._impl import (
    discount_status,
    is_discount_eligible,
    record_visit,
    validate_visit_date,
    visits_until_discount,
)
from .component import run_record_visit
from .models import (
    DISCOUNT_INTERVAL,
    DISCOUNT_PERCENT,
    DiscountStatus,
    RecordVisitInput,
    RecordVisitOutput,
)
from .ports import LedgerStorePort

__all__ = [
    # Entry points
    "run_record_visit",
    # Functional core
    "record_visit",
    "is_discount_eligible",
    "visits_until_discount",
    "discount_status",
    "validate_visit_date",
    # Models
    "RecordVisitInput",
    "RecordVisitOutput",
    "DiscountStatus",
    # Constants
    "DISCOUNT_INTERVAL",
    "DISCOUNT_PERCENT",
    # Ports
    "LedgerStorePort",
]
