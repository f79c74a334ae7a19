"""
CsvExporter - spreadsheet-safe CSV rendering.

Functional Core - pure business logic.

Key behaviors:
- Payloads are UTF-8 with a BOM
- Free-text columns are always double-quoted, with " doubled
- Same input gives byte-identical output; only filenames carry a date
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from salonbook.domain.entities import Customer
from salonbook.domain.errors import EmptyDataError

from .models import (
    DEFAULT_CSV_CONFIG,
    DIRECTORY_FILENAME,
    DIRECTORY_HEADER,
    HISTORY_FILENAME,
    HISTORY_HEADER,
    CsvConfig,
)

_SPECIAL = (",", '"', "\r", "\n")


# --- Field Rendering ---


def quoted(value: str | None) -> str:
    """Always quote, doubling embedded quotes."""
    return '"' + (value or "").replace('"', '""') + '"'


def plain(value: object) -> str:
    """Leave unquoted unless the value would break the row."""
    text = "" if value is None else str(value)
    if any(ch in text for ch in _SPECIAL):
        return quoted(text)
    return text


def _render(header: Sequence[str], rows: list[str], config: CsvConfig) -> bytes:
    lines = [",".join(header), *rows]
    return config.line_terminator.join(lines).encode(config.encoding)


# --- Exports ---


def export_history(customer: Customer, config: CsvConfig = DEFAULT_CSV_CONFIG) -> bytes:
    """One row per visit, in history order (most recent first)."""
    if not customer.history:
        raise EmptyDataError(f"visit history of {customer.name}")

    rows = [f"{plain(record.date)},{quoted(record.note)}" for record in customer.history]
    return _render(HISTORY_HEADER, rows, config)


def export_directory(
    customers: Sequence[Customer], config: CsvConfig = DEFAULT_CSV_CONFIG
) -> bytes:
    """One row per customer, in input order."""
    if not customers:
        raise EmptyDataError("customer list")

    rows = [
        ",".join(
            (
                plain(c.id),
                quoted(c.name),
                quoted(c.kana),
                quoted(c.phone),
                plain(c.visit_count),
            )
        )
        for c in customers
    ]
    return _render(DIRECTORY_HEADER, rows, config)


# --- Filenames ---


def history_filename(customer: Customer) -> str:
    return HISTORY_FILENAME.format(name=customer.name)


def directory_filename(today: date) -> str:
    return DIRECTORY_FILENAME.format(date=today.isoformat())
