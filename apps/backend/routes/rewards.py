from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from apps.backend.db import get_supabase
from apps.backend.routes.repositories.transaction_repository import (
    InMemoryTransactionRepository,
    SupabaseTransactionRepository,
    TransactionLookup,
)
from apps.backend.routes.services.rewards.points_calculator import PointsCalculator
from apps.backend.routes.services.rewards.reward_aggregator import RewardAggregator
from apps.backend.utils.envelope import ok
from apps.backend.utils.errors import RewardsError
from apps.backend.utils.settings import get_settings

log = logging.getLogger("rewards.routes")

router = APIRouter(prefix="/rewards", tags=["Rewards"])
config_router = APIRouter(prefix="/config", tags=["Rewards"])

_memory_repo: Optional[InMemoryTransactionRepository] = None


def get_lookup() -> TransactionLookup:
    global _memory_repo
    settings = get_settings()

    if settings.STORE == "supabase":
        sb = get_supabase()
        if not sb:
            raise RewardsError("Supabase client unavailable", 500)
        return SupabaseTransactionRepository(sb, table=settings.TRANSACTIONS_TABLE)

    if _memory_repo is None:
        if settings.SEED_FILE:
            _memory_repo = InMemoryTransactionRepository.from_json_file(settings.SEED_FILE)
        else:
            log.warning("No REWARDS_SEED_FILE set, in-memory transaction store is empty")
            _memory_repo = InMemoryTransactionRepository()
    return _memory_repo


def get_calculator() -> PointsCalculator:
    settings = get_settings()
    return PointsCalculator.from_thresholds(
        lower=settings.LOWER_THRESHOLD,
        upper=settings.UPPER_THRESHOLD,
        rate_low=settings.RATE_LOW,
        rate_high=settings.RATE_HIGH,
    )


def get_aggregator(
    lookup: TransactionLookup = Depends(get_lookup),
    calculator: PointsCalculator = Depends(get_calculator),
) -> RewardAggregator:
    return RewardAggregator(lookup, calculator)


@config_router.get("/rewards")
def rewards_config(calculator: PointsCalculator = Depends(get_calculator)):
    return ok(calculator.to_dict())


@router.get("/{customer_id}")
def rewards_for_customer(customer_id: str, aggregator: RewardAggregator = Depends(get_aggregator)):
    summary = aggregator.summarize(customer_id)
    return ok(summary.to_dict())
