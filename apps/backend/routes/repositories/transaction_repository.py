from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..services.rewards.models import Transaction

log = logging.getLogger("rewards.repository")


class TransactionLookup(Protocol):
    def find_by_customer_id(self, customer_id: str) -> Optional[List[Transaction]]:
        ...


class SupabaseTransactionRepository:
    def __init__(self, supabase_client: Any, *, table: str = "transactions") -> None:
        self.sb = supabase_client
        self.table = table

    def find_by_customer_id(self, customer_id: str) -> List[Transaction]:
        r = (
            self.sb.table(self.table)
            .select("id, customer_id, amount, created_at")
            .eq("customer_id", customer_id)
            .execute()
        )
        rows = getattr(r, "data", None) or []
        log.debug("Fetched %d transaction rows for customer_id=%s", len(rows), customer_id)
        return [row_to_transaction(row) for row in rows if isinstance(row, dict)]


class InMemoryTransactionRepository:
    """
    Read-only store keyed by customer id. Used for local runs and tests.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._by_customer: Dict[str, List[Transaction]] = {}
        for t in transactions:
            self._by_customer.setdefault(t.customer_id, []).append(t)

    def find_by_customer_id(self, customer_id: str) -> List[Transaction]:
        return list(self._by_customer.get(customer_id, []))

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryTransactionRepository":
        """
        Load a JSON list of {"id", "customer_id", "amount", "timestamp"} rows.
        """
        p = Path(path)
        with open(p, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"Seed file must contain a JSON list: {p}")

        for i, row in enumerate(rows):
            if not isinstance(row, dict):
                raise ValueError(f"Seed row {i} in {p} must be a JSON object")
        txns = [row_to_transaction(row) for row in rows]
        log.info("Loaded %d seed transactions from %s", len(txns), p)
        return cls(txns)


class TransactionRow(BaseModel):
    """
    Stored row shape. Supabase names the time column created_at, seed files
    may use timestamp.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    customer_id: str
    amount: Decimal
    timestamp: datetime = Field(validation_alias=AliasChoices("timestamp", "created_at"))


def row_to_transaction(row: Dict[str, Any]) -> Transaction:
    r = TransactionRow.model_validate(row)
    return Transaction(id=r.id, customer_id=r.customer_id, amount=r.amount, timestamp=r.timestamp)

