"""Tests for sink serialization helpers."""

from datetime import date, datetime, time
from decimal import Decimal

from momo_ledger.models import Channel, TransactionRecord
from momo_ledger.sinks.serialization import record_to_dict, serialize_value, to_dict


class TestSerializeValue:
    """Tests for serialize_value()."""

    def test_decimal_keeps_scale(self) -> None:
        """Test Decimals become exact strings."""
        assert serialize_value(Decimal("635.90")) == "635.90"

    def test_enum_value(self) -> None:
        """Test enums become their value."""
        assert serialize_value(Channel.MOBILE) == "M-PESA"

    def test_temporal(self) -> None:
        """Test dates and times become ISO strings."""
        assert serialize_value(date(2026, 2, 12)) == "2026-02-12"
        assert serialize_value(time(11, 37)) == "11:37:00"
        assert serialize_value(datetime(2026, 2, 12, 11, 37)) == "2026-02-12T11:37:00"

    def test_containers(self) -> None:
        """Test nested dicts, lists and tuples."""
        value = {"a": [Decimal("1"), (Channel.AGENT,)], "b": None}
        assert serialize_value(value) == {"a": ["1", ["AGENT"]], "b": None}

    def test_passthrough(self) -> None:
        """Test plain JSON values are unchanged."""
        assert serialize_value("x") == "x"
        assert serialize_value(3) == 3
        assert serialize_value(None) is None


class TestToDict:
    """Tests for to_dict() and record_to_dict()."""

    def test_record(self, scenario_records: list[TransactionRecord]) -> None:
        """Test a record serializes every field."""
        data = record_to_dict(scenario_records[2])

        assert data["transaction_id"] == "DBC1MV31SMZ"
        assert data["status"] == "Confirmed"
        assert data["transaction_type"] == "MONEY_TRANSFER"
        assert data["channel"] == "M-PESA"
        assert data["time"] is None
        assert data["currency"] == "TZS"
        assert "total_charges" not in data

    def test_to_dict_dispatch(self, scenario_records: list[TransactionRecord]) -> None:
        """Test dataclasses, dicts and other values."""
        assert to_dict(scenario_records[0]) == record_to_dict(scenario_records[0])
        assert to_dict({"fee": Decimal("5")}) == {"fee": "5"}
        assert to_dict(42) == {"value": "42"}
