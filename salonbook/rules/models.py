from typing import Literal

from pydantic import BaseModel, Field


class LoyaltyRules(BaseModel):
    discount_interval: int = Field(default=10, ge=1)
    discount_percent: int = Field(default=10, ge=1, le=100)


class ExportRules(BaseModel):
    line_terminator: Literal["\n", "\r\n"] = "\n"


class StorageRules(BaseModel):
    db_filename: str = "salon.db"


class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class SalonRules(BaseModel):
    loyalty: LoyaltyRules = Field(default_factory=LoyaltyRules)
    export: ExportRules = Field(default_factory=ExportRules)
    storage: StorageRules = Field(default_factory=StorageRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
