from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

D = Decimal


def _env_decimal(name: str, default: str) -> Decimal:
    raw = (os.getenv(name) or default).strip()
    try:
        return D(raw)
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = (os.getenv(name) or "").strip()
    return val or default


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration for the rewards service.

    The four tier constants drive the points rule; everything else is wiring.
    """
    REWARDS_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Points rule
    LOWER_THRESHOLD: Decimal = D("50")
    UPPER_THRESHOLD: Decimal = D("100")
    RATE_LOW: Decimal = D("1")
    RATE_HIGH: Decimal = D("2")

    # Transaction lookup
    STORE: str = "memory"
    SEED_FILE: Optional[str] = None
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    TRANSACTIONS_TABLE: str = "transactions"

    def __post_init__(self) -> None:
        if self.LOWER_THRESHOLD >= self.UPPER_THRESHOLD:
            raise ValueError("REWARDS_LOWER_THRESHOLD must be below REWARDS_UPPER_THRESHOLD")
        if self.RATE_LOW < D("0"):
            raise ValueError("REWARDS_RATE_LOW cannot be negative")
        if self.RATE_HIGH <= self.RATE_LOW:
            raise ValueError("REWARDS_RATE_HIGH must be greater than REWARDS_RATE_LOW")
        if self.STORE not in ("memory", "supabase"):
            raise ValueError("REWARDS_STORE must be 'memory' or 'supabase'")

    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)

    @staticmethod
    def from_env() -> "Settings":
        url = _env_str("SUPABASE_URL")
        key = _env_str("SUPABASE_SERVICE_ROLE_KEY")
        default_store = "supabase" if (url and key) else "memory"

        return Settings(
            REWARDS_VERSION=_env_str("REWARDS_VERSION", "1.0.0"),
            LOG_LEVEL=_env_str("LOG_LEVEL", "INFO").upper(),
            LOWER_THRESHOLD=_env_decimal("REWARDS_LOWER_THRESHOLD", "50"),
            UPPER_THRESHOLD=_env_decimal("REWARDS_UPPER_THRESHOLD", "100"),
            RATE_LOW=_env_decimal("REWARDS_RATE_LOW", "1"),
            RATE_HIGH=_env_decimal("REWARDS_RATE_HIGH", "2"),
            STORE=_env_str("REWARDS_STORE", default_store).lower(),
            SEED_FILE=_env_str("REWARDS_SEED_FILE"),
            SUPABASE_URL=url,
            SUPABASE_SERVICE_ROLE_KEY=key,
            TRANSACTIONS_TABLE=_env_str("REWARDS_TRANSACTIONS_TABLE", "transactions"),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
