# salonbook - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from salonbook.core.ports.clock import ClockPort
from salonbook.core.ports.store import BackendError, CustomerStorePort

__all__ = [
    "BackendError",
    "ClockPort",
    "CustomerStorePort",
]
