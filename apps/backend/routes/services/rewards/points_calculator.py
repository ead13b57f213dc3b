"""
Points Calculator (Canonical)
=============================

Purpose:
- Deterministic amount -> points conversion.
- Pure domain logic: no DB, no HTTP, no logging.

Rule:
- Tiers are an ordered table of (threshold, rate) pairs.
- A tier earns `rate` points per currency unit for the part of the amount
  above its threshold and up to the next tier's threshold.
- Each tier's contribution is floored on its own, then summed.

With the default table [(50, 1), (100, 2)]:
    75  -> 25
    100 -> 50
    200 -> 50 + 200 = 250
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR
from typing import Any, Dict, List, Optional, Sequence, Tuple


D = Decimal

DEFAULT_LOWER_THRESHOLD = D("50")
DEFAULT_UPPER_THRESHOLD = D("100")
DEFAULT_RATE_LOW = D("1")
DEFAULT_RATE_HIGH = D("2")


def _floor_int(x: Decimal) -> int:
    return int(x.to_integral_value(rounding=ROUND_FLOOR))


def _to_decimal(v: Any) -> Decimal:
    if isinstance(v, Decimal):
        return v
    return D(str(v))


@dataclass(frozen=True)
class RateTier:
    """
    Earn `rate` points per unit of amount above `threshold`.
    """
    threshold: Decimal
    rate: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {"threshold": str(self.threshold), "rate": str(self.rate)}


class PointsCalculator:
    """
    Tiered accrual. Build with `from_thresholds` for the classic two-tier
    program or pass any ordered table of tiers.
    """

    def __init__(self, tiers: Sequence[RateTier]) -> None:
        self.tiers: Tuple[RateTier, ...] = tuple(tiers)
        self._validate()

    @classmethod
    def from_thresholds(
        cls,
        *,
        lower: Decimal = DEFAULT_LOWER_THRESHOLD,
        upper: Decimal = DEFAULT_UPPER_THRESHOLD,
        rate_low: Decimal = DEFAULT_RATE_LOW,
        rate_high: Decimal = DEFAULT_RATE_HIGH,
    ) -> "PointsCalculator":
        return cls(
            [
                RateTier(threshold=_to_decimal(lower), rate=_to_decimal(rate_low)),
                RateTier(threshold=_to_decimal(upper), rate=_to_decimal(rate_high)),
            ]
        )

    # -----------------------------
    # Validation
    # -----------------------------
    def _validate(self) -> None:
        if not self.tiers:
            raise ValueError("at least one tier is required")

        prev: Optional[Decimal] = None
        for t in self.tiers:
            if t.rate < D("0"):
                raise ValueError(f"tier rate cannot be negative: {t.rate}")
            if prev is not None and t.threshold <= prev:
                raise ValueError("tier thresholds must be strictly increasing")
            prev = t.threshold

    # -----------------------------
    # Core calculation
    # -----------------------------
    def breakdown(self, amount: Decimal) -> List[int]:
        """
        Points contributed by each tier, in table order.
        """
        amt = _to_decimal(amount)
        out: List[int] = []

        for i, tier in enumerate(self.tiers):
            if amt <= tier.threshold:
                out.append(0)
                continue

            ceiling = self.tiers[i + 1].threshold if i + 1 < len(self.tiers) else None
            top = amt if ceiling is None else min(amt, ceiling)
            out.append(_floor_int((top - tier.threshold) * tier.rate))

        return out

    def calculate(self, amount: Decimal) -> int:
        return sum(self.breakdown(amount))

    def to_dict(self) -> Dict[str, Any]:
        return {"tiers": [t.to_dict() for t in self.tiers]}
