import logging
import os
import sys
from functools import lru_cache
from pathlib import Path

from salonbook.rules.models import SalonRules

logger = logging.getLogger(__name__)


class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("SALON_DATA_DIR", "./data"))
        self.rules_path = Path(os.environ.get("SALON_RULES_PATH", str(self.base_dir / "salon.yaml")))

    def db_path(self, rules: SalonRules) -> str:
        return str(self.data_dir / rules.storage.db_filename)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def validate_ops_rules(rules: SalonRules, settings: Settings) -> None:
    """
    Validate operational requirements before startup.
    """
    # 1. Data dir must exist or be creatable
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.critical("Data directory %s is not usable: %s", settings.data_dir, e)
        sys.exit(1)

    # 2. Storage filename must stay inside the data dir
    if Path(rules.storage.db_filename).name != rules.storage.db_filename:
        logger.critical("storage.db_filename must be a bare filename, got %r", rules.storage.db_filename)
        sys.exit(1)

    if rules.loyalty.discount_interval == 1:
        logger.warning("loyalty.discount_interval is 1: every visit is discounted")

    logger.info("Configuration validated.")
