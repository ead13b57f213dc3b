from __future__ import annotations
from typing import Dict, Any

from apps.backend.routes.repositories.transaction_repository import TransactionLookup


def rewards_healthcheck(lookup: TransactionLookup) -> Dict[str, Any]:
    checks: Dict[str, Any] = {"transactions": False}

    try:
        rows = lookup.find_by_customer_id("__health__")
        if rows is None or isinstance(rows, list):
            checks["transactions"] = True
    except Exception as e:
        checks["transactions_error"] = str(e)

    return {"ok": checks["transactions"], "checks": checks}
