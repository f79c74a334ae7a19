"""
Export component - Port interfaces.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from salonbook.domain.entities import Customer


class CustomerLookupPort(Protocol):
    def get(self, customer_id: str) -> Customer:
        """Get customer by id, raising NotFoundError if absent."""
        ...


class ClockPort(Protocol):
    """Port for the current date - enables deterministic testing."""

    def today(self) -> date:
        ...
