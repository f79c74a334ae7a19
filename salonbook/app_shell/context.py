from __future__ import annotations

from dataclasses import dataclass

from salonbook.adapters.clock import SystemClock
from salonbook.adapters.sqlite.migrator import SQLiteMigrator
from salonbook.adapters.sqlite.store import SQLiteCustomerStore
from salonbook.components.directory import Directory
from salonbook.components.export import CsvConfig
from salonbook.core.ports.clock import ClockPort
from salonbook.core.ports.store import CustomerStorePort
from salonbook.rules.models import SalonRules


@dataclass
class ServiceContext:
    store: CustomerStorePort
    directory: Directory
    csv_config: CsvConfig
    rules: SalonRules
    clock: ClockPort
    db_path: str = ""

    @classmethod
    def create(
        cls, db_path: str, rules: SalonRules, clock: ClockPort | None = None
    ) -> ServiceContext:
        clock = clock or SystemClock()
        store = SQLiteCustomerStore(db_path, clock=clock)
        return cls(
            store=store,
            directory=Directory(store),
            csv_config=CsvConfig(line_terminator=rules.export.line_terminator),
            rules=rules,
            clock=clock,
            db_path=db_path,
        )

    @classmethod
    def for_store(
        cls, store: CustomerStorePort, rules: SalonRules, clock: ClockPort | None = None
    ) -> ServiceContext:
        """Context over an existing store (in-memory in tests)."""
        return cls(
            store=store,
            directory=Directory(store),
            csv_config=CsvConfig(line_terminator=rules.export.line_terminator),
            rules=rules,
            clock=clock or SystemClock(),
        )

    def migrate(self) -> list[str]:
        return SQLiteMigrator(self.db_path).run_migrations()

    @property
    def discount_interval(self) -> int:
        return self.rules.loyalty.discount_interval

    @property
    def discount_percent(self) -> int:
        return self.rules.loyalty.discount_percent
