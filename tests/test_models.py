"""Tests for the record model and enums."""

import dataclasses
from collections.abc import Callable
from decimal import Decimal

import pytest

from momo_ledger.models import (
    CURRENCY,
    Channel,
    Direction,
    TransactionRecord,
    TransactionStatus,
    TransactionType,
)

MakeRecord = Callable[..., TransactionRecord]


class TestEnums:
    """Tests for enum values."""

    def test_status_values(self) -> None:
        """Test status values match message wording."""
        assert TransactionStatus.CONFIRMED.value == "Confirmed"
        assert TransactionStatus.FAILED.value == "Failed"

    def test_string_comparison(self) -> None:
        """Test enums compare equal to their values."""
        assert Direction.SENT == "SENT"
        assert Channel.MOBILE == "M-PESA"

    def test_type_members(self) -> None:
        """Test the full set of transaction types."""
        assert len(TransactionType) == 15
        assert TransactionType("BALANCE_CHECK") is TransactionType.BALANCE_CHECK


class TestTransactionRecord:
    """Tests for TransactionRecord."""

    def test_defaults(self, make_record: MakeRecord) -> None:
        """Test optional field defaults."""
        record = make_record()

        assert record.fee == Decimal("0")
        assert record.government_levy == Decimal("0")
        assert record.counterparty_name is None
        assert record.balance_after is None
        assert record.currency == CURRENCY == "TZS"

    def test_total_charges(self, make_record: MakeRecord) -> None:
        """Test fee plus levy."""
        record = make_record(fee=Decimal("2200"), government_levy=Decimal("360"))
        assert record.total_charges == Decimal("2560")

    def test_frozen(self, make_record: MakeRecord) -> None:
        """Test records cannot be modified in place."""
        record = make_record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.amount = Decimal("1")  # type: ignore[misc]

    def test_hashable_and_equal(self, make_record: MakeRecord) -> None:
        """Test equal records hash equally."""
        assert make_record() == make_record()
        assert len({make_record(), make_record()}) == 1
