from datetime import datetime
from pathlib import Path

import pytest

from salonbook.adapters.clock import FixedClock
from salonbook.adapters.memory_store import InMemoryCustomerStore
from salonbook.adapters.sqlite.migrator import SQLiteMigrator
from salonbook.adapters.sqlite.store import SQLiteCustomerStore
from salonbook.app_shell.config import get_settings
from salonbook.rules.models import SalonRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 7, 1, 10, 30))


@pytest.fixture
def rules() -> SalonRules:
    return SalonRules()


@pytest.fixture
def memory_store(clock: FixedClock) -> InMemoryCustomerStore:
    return InMemoryCustomerStore(clock=clock)


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """A migrated, empty SQLite database."""
    path = str(tmp_path / "salon.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def sqlite_store(db_path: str, clock: FixedClock) -> SQLiteCustomerStore:
    return SQLiteCustomerStore(db_path, clock=clock)


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the CLI at a temp data dir and the repo's salon.yaml.
    Returns the data dir.
    """
    data_dir = tmp_path / "data"
    monkeypatch.setenv("SALON_DATA_DIR", str(data_dir))
    monkeypatch.setenv("SALON_RULES_PATH", str(PROJECT_ROOT / "salon.yaml"))
    get_settings.cache_clear()
    yield data_dir
    get_settings.cache_clear()
