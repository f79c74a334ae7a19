"""
Export component - CSV export of visit histories and the customer list.
"""

from ._impl import (
    directory_filename,
    export_directory,
    export_history,
    history_filename,
)
from .component import run_export_directory, run_export_history
from .models import (
    DEFAULT_CSV_CONFIG,
    DIRECTORY_HEADER,
    HISTORY_HEADER,
    CsvConfig,
    CsvExport,
    ExportHistoryInput,
)
from .ports import ClockPort, CustomerLookupPort

__all__ = [
    # Entry points
    "run_export_history",
    "run_export_directory",
    # Functional core
    "export_history",
    "export_directory",
    "history_filename",
    "directory_filename",
    # Models
    "CsvConfig",
    "CsvExport",
    "ExportHistoryInput",
    # Constants
    "DEFAULT_CSV_CONFIG",
    "HISTORY_HEADER",
    "DIRECTORY_HEADER",
    # Ports
    "ClockPort",
    "CustomerLookupPort",
]
