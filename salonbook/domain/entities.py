from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Visits ---


class VisitRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str  # YYYY-MM-DD
    note: str = ""


# --- Customers ---


class CustomerCandidate(BaseModel):
    """Form data for a customer that has not been stored yet."""

    model_config = ConfigDict(frozen=True)

    name: str
    kana: str = ""
    phone: str = ""
    email: str = ""


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    kana: str = ""
    phone: str = ""
    email: str = ""
    visit_count: int = Field(default=0, ge=0)
    # Most recent visit first
    history: tuple[VisitRecord, ...] = ()
    created_at: datetime | None = None
