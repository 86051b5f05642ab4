"""Caller-owned analytics over a fixed set of transaction records.

An :class:`AnalyticsContext` wraps one snapshot of records and memoises
the aggregates computed from it. There is no module-level cache: a caller
that receives a new record set builds a new context.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Any

from momo_ledger.analytics import calculator
from momo_ledger.models import CURRENCY, Direction, TransactionRecord, TransactionType

ZERO = Decimal("0")
UNKNOWN_COUNTERPARTY = "Unknown"


@dataclass(frozen=True)
class GroupStats:
    total: Decimal
    count: int

    @property
    def average(self) -> Decimal:
        return self.total / self.count if self.count else ZERO


@dataclass(frozen=True)
class Summary:
    count: int
    earliest: date | None
    latest: date | None
    income: Decimal
    expense: Decimal
    current_balance: Decimal | None
    currency: str = CURRENCY

    @property
    def net_flow(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class CounterpartyStats:
    name: str
    total: Decimal
    count: int
    last_seen: date


@dataclass(frozen=True)
class FeeSummary:
    total_fees: Decimal
    total_levies: Decimal
    average_per_transaction: Decimal
    highest: Decimal


@dataclass(frozen=True)
class DailySpending:
    date: date
    total_sent: Decimal
    total_received: Decimal
    count: int
    fees: Decimal

    @property
    def net_spending(self) -> Decimal:
        return self.total_sent - self.total_received


class AnalyticsContext:
    """Aggregates over one snapshot of records.

    Parameters
    ----------
    records : Iterable[TransactionRecord]
        Reconciled records. The context keeps its own copy.
    """

    def __init__(self, records: Iterable[TransactionRecord]) -> None:
        self.records: tuple[TransactionRecord, ...] = tuple(records)
        self._cache: dict[Any, Any] = {}

    def _memo(self, key: Any, compute: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def summary(self) -> Summary:
        """Overall counts, date range, income/expense and latest known balance."""
        return self._memo("summary", self._summary)

    def _summary(self) -> Summary:
        breakdown = calculator.direction_breakdown(self.records)
        dates = sorted(r.date for r in self.records)

        with_balance = [r for r in self.records if r.balance_after is not None]
        latest = max(with_balance, key=lambda r: (r.date, r.time or time.min), default=None)

        return Summary(
            count=len(self.records),
            earliest=dates[0] if dates else None,
            latest=dates[-1] if dates else None,
            income=breakdown.received,
            expense=breakdown.sent,
            current_balance=latest.balance_after if latest else None,
        )

    def by_direction(self) -> dict[Direction, GroupStats]:
        return self._memo("by_direction", lambda: self._group(lambda r: r.direction))

    def by_type(self) -> dict[TransactionType, GroupStats]:
        return self._memo("by_type", lambda: self._group(lambda r: r.transaction_type))

    def _group(self, key: Callable[[TransactionRecord], Any]) -> dict[Any, GroupStats]:
        totals: dict[Any, Decimal] = {}
        counts: dict[Any, int] = {}
        for record in self.records:
            k = key(record)
            totals[k] = totals.get(k, ZERO) + record.amount
            counts[k] = counts.get(k, 0) + 1
        return {k: GroupStats(total=totals[k], count=counts[k]) for k in totals}

    def top_counterparties(self, limit: int = 10) -> list[CounterpartyStats]:
        """Counterparties ranked by total amount, largest first."""
        ranked = self._memo("counterparties", self._counterparties)
        return ranked[:limit]

    def _counterparties(self) -> list[CounterpartyStats]:
        stats: dict[str, CounterpartyStats] = {}
        for record in self.records:
            name = record.counterparty_name or UNKNOWN_COUNTERPARTY
            current = stats.get(name)
            if current is None:
                stats[name] = CounterpartyStats(name, record.amount, 1, record.date)
            else:
                stats[name] = CounterpartyStats(
                    name,
                    current.total + record.amount,
                    current.count + 1,
                    max(current.last_seen, record.date),
                )
        return sorted(stats.values(), key=lambda s: s.total, reverse=True)

    def fee_summary(self) -> FeeSummary:
        return self._memo("fees", self._fee_summary)

    def _fee_summary(self) -> FeeSummary:
        total_fees = sum((r.fee for r in self.records), ZERO)
        total_levies = sum((r.government_levy for r in self.records), ZERO)
        count = len(self.records)
        return FeeSummary(
            total_fees=total_fees,
            total_levies=total_levies,
            average_per_transaction=(total_fees + total_levies) / count if count else ZERO,
            highest=max((r.total_charges for r in self.records), default=ZERO),
        )

    def spending_for_date(self, day: date) -> DailySpending:
        """Sent/received totals and charges for one calendar day."""
        result = self._memo(("day", day), lambda: calculator.sum_by_date(self.records, day))
        return DailySpending(
            date=day,
            total_sent=result.sent_total,
            total_received=result.received_total,
            count=result.count,
            fees=result.fees,
        )

    def spending_for_last_days(self, days: int, today: date | None = None) -> Decimal:
        """Total sent over the last ``days`` days including ``today``."""
        today = today or date.today()
        result = self._memo(
            ("last_days", days, today),
            lambda: calculator.sum_by_last_days(self.records, days, today),
        )
        return result.sent_total
