"""End-to-end tests for parse_all, sync and newest_first."""

from collections.abc import Callable
from datetime import date, time
from decimal import Decimal

from momo_ledger import parse_all, sync
from momo_ledger.generators import DEDUP_SCENARIO
from momo_ledger.models import TransactionRecord
from momo_ledger.pipeline import newest_first

MakeRecord = Callable[..., TransactionRecord]


class TestParseAll:
    """Tests for parse_all()."""

    def test_duplicate_scenario(self, scenario_records: list[TransactionRecord], sms: dict[str, str]) -> None:
        """Test the re-delivered bank transfer merges into one complete record."""
        by_id = {r.transaction_id: r for r in scenario_records}
        transfer = by_id["DBC1MV31SMJ"]

        assert transfer.amount == Decimal("16000.00")
        assert transfer.fee == Decimal("975")
        assert transfer.balance_after == Decimal("635.90")
        assert transfer.counterparty_name == "TIPS-NMB"
        assert transfer.counterparty_account == "24610037018"
        assert transfer.date == date(2026, 2, 12)
        assert transfer.time == time(11, 37)
        assert transfer.raw_text == f"{sms['bank_transfer']} | {sms['bank_transfer_duplicate']}"

    def test_first_seen_order(self, scenario_records: list[TransactionRecord]) -> None:
        """Test output follows first observation order."""
        assert [r.transaction_id for r in scenario_records] == [
            "DBC1MV31SMJ",
            "DBC1MV31SMK",
            "DBC1MV31SMZ",
            "DBC1MV31SMA",
        ]

    def test_input_order_independent(self, scenario_records: list[TransactionRecord], today: date) -> None:
        """Test reversing the batch yields the same transactions and merged values."""
        reversed_records = parse_all(list(reversed(DEDUP_SCENARIO)), today=today)

        assert {r.transaction_id for r in reversed_records} == {r.transaction_id for r in scenario_records}

        forward = {r.transaction_id: r for r in scenario_records}["DBC1MV31SMJ"]
        backward = {r.transaction_id: r for r in reversed_records}["DBC1MV31SMJ"]
        assert backward.amount == forward.amount == Decimal("16000.00")
        assert backward.fee == forward.fee == Decimal("975")
        assert backward.balance_after == forward.balance_after == Decimal("635.90")
        assert backward.status == forward.status
        assert backward.transaction_type == forward.transaction_type

    def test_same_message_twice(self, sms: dict[str, str], today: date) -> None:
        """Test an identical re-delivery collapses with raw text unchanged."""
        records = parse_all([sms["withdraw"], sms["withdraw"]], today=today)

        assert len(records) == 1
        assert records[0].raw_text == sms["withdraw"]

    def test_rejected_messages_dropped(self, sms: dict[str, str], today: date) -> None:
        """Test non-transactional messages are absent from the output."""
        records = parse_all(["Promo!", "", sms["money_receive"], "lowercase text"], today=today)
        assert [r.transaction_id for r in records] == ["DBC1MV31SMZ"]

    def test_empty(self) -> None:
        """Test an empty batch."""
        assert parse_all([]) == []

    def test_process_pool_matches_serial(self, today: date) -> None:
        """Test parsing with worker processes gives the same records."""
        serial = parse_all(DEDUP_SCENARIO, today=today)
        pooled = parse_all(DEDUP_SCENARIO, today=today, processes=2)
        assert pooled == serial

    def test_default_today(self, sms: dict[str, str]) -> None:
        """Test undated messages fall back to the current date."""
        records = parse_all([sms["bank_transfer_duplicate"]])
        assert records[0].date == date.today()


class TestNewestFirst:
    """Tests for newest_first()."""

    def test_scenario_order(self, scenario_records: list[TransactionRecord]) -> None:
        """Test records are sorted by date, most recent first."""
        ordered = newest_first(scenario_records)
        assert [r.date for r in ordered] == [
            date(2026, 2, 13),
            date(2026, 2, 12),
            date(2026, 2, 11),
            date(2026, 2, 10),
        ]

    def test_time_breaks_ties(self, make_record: MakeRecord) -> None:
        """Test records on the same date are ordered by time."""
        early = make_record(transaction_id="A", time=time(8, 0))
        late = make_record(transaction_id="B", time=time(20, 0))
        untimed = make_record(transaction_id="C", time=None)

        ordered = newest_first([untimed, early, late])
        assert [r.transaction_id for r in ordered] == ["B", "A", "C"]


class TestSync:
    """Tests for sync()."""

    def test_merges_new_with_stored(self, sms: dict[str, str], today: date) -> None:
        """Test a new abbreviated message merges into the stored record.

        The undated re-delivery is the first side, so its fallback date
        replaces the stored one. This is the known risk of the today
        fallback, not a desired outcome.
        """
        stored = parse_all([sms["bank_transfer"], sms["withdraw"]], today=today)

        result = sync([sms["bank_transfer_duplicate"], sms["money_receive"]], stored, today=today)

        assert len(result) == 3
        # The undated re-delivery is first in the merge, so the transfer takes today's date
        assert [r.transaction_id for r in result] == ["DBC1MV31SMJ", "DBC1MV31SMZ", "DBC1MV31SMA"]

        transfer = result[0]
        assert transfer.fee == Decimal("975")
        assert transfer.time == time(11, 37)
        assert transfer.balance_after == Decimal("635.90")

    def test_new_record_takes_first_side(self, sms: dict[str, str], today: date) -> None:
        """Test an undated re-delivery overwrites the stored date with the today fallback.

        Pins the documented limitation of the date fallback: the real
        date 2026-02-12 is lost because the new record is the first side.
        """
        stored = parse_all([sms["bank_transfer"]], today=today)

        result = sync([sms["bank_transfer_duplicate"]], stored, today=today)

        assert len(result) == 1
        assert result[0].date == today
        assert result[0].raw_text.startswith(sms["bank_transfer_duplicate"])

    def test_resync_does_not_grow_raw_text(self, sms: dict[str, str], today: date) -> None:
        """Test syncing an already stored message leaves the audit trail unchanged."""
        stored = parse_all([sms["bank_transfer"], sms["bank_transfer_duplicate"]], today=today)

        once = sync([sms["bank_transfer"]], stored, today=today)
        twice = sync([sms["bank_transfer"]], once, today=today)

        assert once[0].raw_text == stored[0].raw_text
        assert twice[0].raw_text == stored[0].raw_text
        assert twice[0].raw_text.count(" | ") == 1

    def test_no_new_messages(self, scenario_records: list[TransactionRecord], today: date) -> None:
        """Test syncing nothing returns the stored records sorted."""
        result = sync([], scenario_records, today=today)
        assert result == newest_first(scenario_records)
