"""Tests for environment-driven settings."""

from decimal import Decimal

import pytest

from apps.backend.utils.settings import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in (
        "REWARDS_LOWER_THRESHOLD",
        "REWARDS_UPPER_THRESHOLD",
        "REWARDS_RATE_LOW",
        "REWARDS_RATE_HIGH",
        "REWARDS_STORE",
        "SUPABASE_URL",
        "SUPABASE_SERVICE_ROLE_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    s = Settings.from_env()

    assert s.LOWER_THRESHOLD == Decimal("50")
    assert s.UPPER_THRESHOLD == Decimal("100")
    assert s.RATE_LOW == Decimal("1")
    assert s.RATE_HIGH == Decimal("2")
    assert s.STORE == "memory"


def test_thresholds_from_env(monkeypatch):
    monkeypatch.setenv("REWARDS_LOWER_THRESHOLD", "25")
    monkeypatch.setenv("REWARDS_UPPER_THRESHOLD", "250.50")
    monkeypatch.setenv("REWARDS_RATE_HIGH", "3")

    s = get_settings()

    assert s.LOWER_THRESHOLD == Decimal("25")
    assert s.UPPER_THRESHOLD == Decimal("250.50")
    assert s.RATE_HIGH == Decimal("3")


def test_supabase_env_selects_supabase_store(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")

    s = Settings.from_env()

    assert s.supabase_configured
    assert s.STORE == "supabase"


@pytest.mark.parametrize(
    "env",
    [
        {"REWARDS_LOWER_THRESHOLD": "100", "REWARDS_UPPER_THRESHOLD": "100"},
        {"REWARDS_RATE_LOW": "2", "REWARDS_RATE_HIGH": "2"},
        {"REWARDS_RATE_LOW": "abc"},
        {"REWARDS_STORE": "redis"},
    ],
)
def test_invalid_values_rejected(monkeypatch, env):
    for k, v in env.items():
        monkeypatch.setenv(k, v)

    with pytest.raises(ValueError):
        Settings.from_env()
