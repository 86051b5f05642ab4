"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import date, time
from decimal import Decimal
from typing import Any

import pytest

from momo_ledger.generators import DEDUP_SCENARIO, EXAMPLE_SMS
from momo_ledger.models import (
    Channel,
    Direction,
    TransactionRecord,
    TransactionStatus,
    TransactionType,
)
from momo_ledger.pipeline import parse_all


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Reference date used as the fallback for undated messages."""
    return date(2026, 2, 15)


@pytest.fixture
def sms() -> dict[str, str]:
    """Sample confirmation messages keyed by scenario."""
    return dict(EXAMPLE_SMS)


@pytest.fixture
def scenario_records(today: date) -> list[TransactionRecord]:
    """Reconciled records for the duplicate-delivery scenario."""
    return parse_all(DEDUP_SCENARIO, today=today)


@pytest.fixture
def make_record() -> Callable[..., TransactionRecord]:
    """Factory for records with sensible defaults."""

    def _make(**overrides: Any) -> TransactionRecord:
        values: dict[str, Any] = {
            "transaction_id": "ABC123XYZ",
            "status": TransactionStatus.CONFIRMED,
            "direction": Direction.SENT,
            "transaction_type": TransactionType.MONEY_TRANSFER,
            "amount": Decimal("1000.00"),
            "channel": Channel.MOBILE,
            "date": date(2026, 2, 12),
            "raw_text": "ABC123XYZ Confirmed. Tsh1,000.00 sent to ALICE",
            "time": time(9, 30),
        }
        values.update(overrides)
        return TransactionRecord(**values)

    return _make
