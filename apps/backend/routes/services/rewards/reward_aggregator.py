"""
Reward Aggregator (Canonical Integration Layer)
===============================================

Purpose:
- Fetch a customer's transactions through the lookup collaborator.
- Price each one with the PointsCalculator.
- Roll the points up per month of year and as a grand total.

No HTTP here. Routes should call this.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict

from apps.backend.routes.repositories.transaction_repository import TransactionLookup
from apps.backend.utils.errors import ResourceNotFoundError

from .models import Month, RewardSummary
from .points_calculator import PointsCalculator

log = logging.getLogger("rewards.aggregator")


class RewardAggregator:
    """
    Lookup contract:
    - find_by_customer_id(customer_id) -> List[Transaction] | None
    """

    def __init__(self, lookup: TransactionLookup, calculator: PointsCalculator) -> None:
        self.lookup = lookup
        self.calculator = calculator

    def summarize(self, customer_id: str) -> RewardSummary:
        """
        Build the reward summary for one customer.

        Raises ResourceNotFoundError when the lookup returns nothing.
        Lookup failures propagate unchanged.
        """
        transactions = self.lookup.find_by_customer_id(customer_id)
        if not transactions:
            raise ResourceNotFoundError(f"No transactions found for customer: {customer_id}")

        monthly: Dict[Month, int] = defaultdict(int)
        total = 0

        for txn in transactions:
            points = self.calculator.calculate(txn.amount)
            if points:
                monthly[Month.of(txn.timestamp)] += points
            total += points

        log.info(
            "Summarized %d transactions for customer_id=%s: %d points over %d months",
            len(transactions),
            customer_id,
            total,
            len(monthly),
        )

        return RewardSummary(
            customer_id=customer_id,
            monthly_points=dict(monthly),
            total_points=total,
        )
