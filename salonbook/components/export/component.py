"""
Export component - CSV downloads.

Shell Layer - resolves the customer(s) and the current date, then hands
over to the pure renderers.
"""

from __future__ import annotations

from collections.abc import Sequence

from salonbook.domain.entities import Customer

from ._impl import directory_filename, export_directory, export_history, history_filename
from .models import DEFAULT_CSV_CONFIG, CsvConfig, CsvExport, ExportHistoryInput
from .ports import ClockPort, CustomerLookupPort


def run_export_history(
    inp: ExportHistoryInput,
    lookup: CustomerLookupPort,
    config: CsvConfig = DEFAULT_CSV_CONFIG,
) -> CsvExport:
    """Render one customer's visit history."""
    customer = lookup.get(inp.customer_id)
    return CsvExport(
        filename=history_filename(customer),
        payload=export_history(customer, config),
        rows=len(customer.history),
    )


def run_export_directory(
    customers: Sequence[Customer],
    clock: ClockPort,
    config: CsvConfig = DEFAULT_CSV_CONFIG,
) -> CsvExport:
    """Render the full customer list."""
    payload = export_directory(customers, config)
    return CsvExport(
        filename=directory_filename(clock.today()),
        payload=payload,
        rows=len(customers),
    )
