"""
Directory read-side transformations.

Functional Core - pure business logic.

Key behaviors:
- filter() is an exact, case-sensitive substring match on name or kana
- group_by_phonetic_row() partitions customers into the eleven gojūon
  rows by the first character of kana, sorted by collated kana
- empty rows are omitted, row order is fixed
"""

from __future__ import annotations

from collections.abc import Iterable

from salonbook.domain.entities import Customer, CustomerCandidate
from salonbook.domain.errors import ValidationError

from ._collation import CollationKey, collation_key
from .models import ROW_RANGES, GroupedCustomers, PhoneticRow

# --- Validation Functions ---


def validate_candidate(candidate: CustomerCandidate) -> None:
    """Raise ValidationError if the candidate cannot be stored."""
    if not candidate.name or not candidate.name.strip():
        raise ValidationError("name", "name is required")


# --- Read-side Transformations ---


def filter_customers(customers: Iterable[Customer], term: str) -> tuple[Customer, ...]:
    """Customers whose name or kana contains term. Empty term matches all."""
    if not term:
        return tuple(customers)
    return tuple(c for c in customers if term in c.name or (c.kana and term in c.kana))


def classify_row(kana: str | None) -> PhoneticRow:
    """Row label for a reading, by its first character."""
    if not kana:
        return PhoneticRow.OTHER

    first = kana[0]
    for row, ranges in ROW_RANGES.items():
        if any(start <= first <= end for start, end in ranges):
            return row
    return PhoneticRow.OTHER


def sort_key(customer: Customer) -> tuple[CollationKey, CollationKey]:
    # Name breaks ties, which orders the empty-kana members of 他
    return (collation_key(customer.kana or ""), collation_key(customer.name))


def group_by_phonetic_row(customers: Iterable[Customer]) -> GroupedCustomers:
    """
    Group customers by gojūon row for display.

    Every customer lands in exactly one row. Rows keep PhoneticRow order
    and rows without members are left out.
    """
    buckets: dict[PhoneticRow, list[Customer]] = {row: [] for row in PhoneticRow}
    for customer in customers:
        buckets[classify_row(customer.kana)].append(customer)

    return {
        row: tuple(sorted(members, key=sort_key))
        for row, members in buckets.items()
        if members
    }
