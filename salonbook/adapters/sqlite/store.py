"""
SQLite customer store.

One row per customer; the visit history is kept as a JSON array in the
row, most recent first, so a customer round-trips as a single record.
Every sqlite3 failure is raised as BackendError with the cause chained.
"""

import json
import logging
import sqlite3
from datetime import datetime
from typing import Any
from uuid import uuid4

from salonbook.adapters.clock import SystemClock
from salonbook.core.ports.clock import ClockPort
from salonbook.core.ports.store import BackendError
from salonbook.domain.entities import Customer, CustomerCandidate, VisitRecord

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _history_to_json(history: tuple[VisitRecord, ...]) -> str:
    return json.dumps([r.model_dump() for r in history], ensure_ascii=False)


def _history_from_json(raw: str | None) -> tuple[VisitRecord, ...]:
    return tuple(VisitRecord.model_validate(item) for item in json.loads(raw or "[]"))


class SQLiteCustomerStore:
    def __init__(self, db_path: str, clock: ClockPort | None = None):
        self.db_path = db_path
        self._clock = clock or SystemClock()

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise BackendError("connect", str(e)) from e
        conn.row_factory = dict_factory
        return conn

    def create(self, candidate: CustomerCandidate) -> Customer:
        customer = Customer(
            id=uuid4().hex,
            name=candidate.name,
            kana=candidate.kana or "",
            phone=candidate.phone,
            email=candidate.email,
            created_at=self._clock.now(),
        )
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO customers (
                    id, name, kana, phone, email, visit_count, history_json, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    customer.id,
                    customer.name,
                    customer.kana,
                    customer.phone,
                    customer.email,
                    customer.visit_count,
                    _history_to_json(customer.history),
                    customer.created_at.isoformat() if customer.created_at else "",
                ),
            )
            conn.commit()
            logger.info("Created customer %s", customer.id)
            return customer
        except sqlite3.Error as e:
            raise BackendError("create", str(e)) from e
        finally:
            conn.close()

    def get(self, customer_id: str) -> Customer | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM customers WHERE id = ?", (customer_id,)).fetchone()
            return self._map_row(row) if row else None
        except sqlite3.Error as e:
            raise BackendError("get", str(e)) from e
        finally:
            conn.close()

    def update_visits(
        self,
        customer_id: str,
        visit_count: int,
        history: tuple[VisitRecord, ...],
    ) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "UPDATE customers SET visit_count = ?, history_json = ? WHERE id = ?",
                (visit_count, _history_to_json(tuple(history)), customer_id),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise BackendError("update_visits", str(e)) from e
        finally:
            conn.close()

    def delete(self, customer_id: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
            conn.commit()
            logger.info("Deleted customer %s", customer_id)
        except sqlite3.Error as e:
            raise BackendError("delete", str(e)) from e
        finally:
            conn.close()

    def list_all(self) -> list[Customer]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM customers ORDER BY seq ASC").fetchall()
            return [self._map_row(row) for row in rows]
        except sqlite3.Error as e:
            raise BackendError("list_all", str(e)) from e
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Customer:
        # JSONDecodeError and pydantic's ValidationError are both ValueErrors
        try:
            return Customer(
                id=row["id"],
                name=row["name"],
                kana=row["kana"] or "",
                phone=row["phone"] or "",
                email=row["email"] or "",
                visit_count=row["visit_count"],
                history=_history_from_json(row["history_json"]),
                created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
            )
        except (ValueError, TypeError) as e:
            raise BackendError("decode", f"customer {row['id']}: {e}") from e
