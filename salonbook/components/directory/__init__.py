"""
Directory component - Customer collection, search and gojūon grouping.
"""

from ._collation import collation_key
from ._impl import classify_row, filter_customers, group_by_phonetic_row, validate_candidate
from .component import Directory
from .models import ROW_RANGES, GroupedCustomers, PhoneticRow
from .ports import DirectoryStorePort

__all__ = [
    # Entry points
    "Directory",
    # Functional core
    "filter_customers",
    "group_by_phonetic_row",
    "classify_row",
    "collation_key",
    "validate_candidate",
    # Models
    "PhoneticRow",
    "GroupedCustomers",
    "ROW_RANGES",
    # Ports
    "DirectoryStorePort",
]
