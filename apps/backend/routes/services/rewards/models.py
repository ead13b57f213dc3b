"""
Rewards Domain Models
=====================

Immutable records shared by the calculator, aggregator and repositories.

- Transaction is owned by the lookup layer; rewards code only reads it.
- RewardSummary is built fresh per request and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, Mapping


class Month(IntEnum):
    """
    Month of year. Buckets are year-agnostic: January 2023 and January 2024
    land in the same entry.
    """
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, ts: datetime) -> "Month":
        return cls(ts.month)


@dataclass(frozen=True)
class Transaction:
    id: str
    customer_id: str
    amount: Decimal
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "amount": str(self.amount),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class RewardSummary:
    """
    Per-customer reward totals.

    monthly_points only holds months that actually earned points, and
    total_points is always the sum of its values.
    """
    customer_id: str
    monthly_points: Mapping[Month, int] = field(default_factory=dict)
    total_points: int = 0

    def __post_init__(self) -> None:
        # Read-only view so the summary stays immutable after construction
        object.__setattr__(self, "monthly_points", MappingProxyType(dict(self.monthly_points)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "monthly_points": {m.name: int(p) for m, p in sorted(self.monthly_points.items())},
            "total_points": int(self.total_points),
        }
