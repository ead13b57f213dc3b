"""Shared fixtures for rewards tests."""

from datetime import datetime
from decimal import Decimal
from typing import List

import pytest

from apps.backend.routes.repositories.transaction_repository import InMemoryTransactionRepository
from apps.backend.routes.services.rewards.models import Transaction
from apps.backend.routes.services.rewards.points_calculator import PointsCalculator
from apps.backend.routes.services.rewards.reward_aggregator import RewardAggregator


def make_txn(txn_id: str, customer_id: str, amount: str, ts: datetime) -> Transaction:
    return Transaction(id=txn_id, customer_id=customer_id, amount=Decimal(amount), timestamp=ts)


@pytest.fixture
def calculator() -> PointsCalculator:
    """Default program: 1 point per unit over 50, 2 per unit over 100."""
    return PointsCalculator.from_thresholds()


@pytest.fixture
def quarter_transactions() -> List[Transaction]:
    """Jan 120 -> 90, Feb 80 -> 30, Mar 45 -> 0."""
    return [
        make_txn("1", "cust123", "120.0", datetime(2024, 1, 10, 10, 0)),
        make_txn("2", "cust123", "80.0", datetime(2024, 2, 15, 10, 0)),
        make_txn("3", "cust123", "45.0", datetime(2024, 3, 20, 10, 0)),
    ]


@pytest.fixture
def memory_repo(quarter_transactions: List[Transaction]) -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository(quarter_transactions)


@pytest.fixture
def aggregator(memory_repo: InMemoryTransactionRepository, calculator: PointsCalculator) -> RewardAggregator:
    return RewardAggregator(memory_repo, calculator)
