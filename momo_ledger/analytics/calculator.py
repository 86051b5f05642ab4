"""Sums over transaction records by date, period, type and direction."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from momo_ledger.models import Direction, TransactionRecord, TransactionType

ZERO = Decimal("0")


@dataclass(frozen=True)
class SumOptions:
    """Optional filters applied before summing."""

    direction: Direction | None = None
    transaction_type: TransactionType | None = None
    exclude_fees: bool = False


@dataclass(frozen=True)
class SumResult:
    """Totals for a filtered set of records.

    ``fees`` is operator fee plus government levy. When fees are
    excluded, ``total`` is the amount total minus ``fees``.
    """

    total: Decimal
    count: int
    fees: Decimal
    sent_total: Decimal
    received_total: Decimal


@dataclass(frozen=True)
class DirectionBreakdown:
    sent: Decimal
    received: Decimal

    @property
    def net(self) -> Decimal:
        return self.received - self.sent


def _matches(record: TransactionRecord, options: SumOptions | None) -> bool:
    if options is None:
        return True
    if options.direction is not None and record.direction != options.direction:
        return False
    if options.transaction_type is not None and record.transaction_type != options.transaction_type:
        return False
    return True


def compute_result(records: Iterable[TransactionRecord], exclude_fees: bool = False) -> SumResult:
    """Total up amounts and charges for ``records``."""
    total = fees = sent = received = ZERO
    count = 0

    for record in records:
        count += 1
        total += record.amount
        fees += record.total_charges
        if record.direction == Direction.SENT:
            sent += record.amount
        else:
            received += record.amount

    return SumResult(
        total=total - fees if exclude_fees else total,
        count=count,
        fees=fees,
        sent_total=sent,
        received_total=received,
    )


def sum_by_date_range(
    records: Iterable[TransactionRecord],
    start: date,
    end: date,
    options: SumOptions | None = None,
) -> SumResult:
    """Sum records dated between ``start`` and ``end`` inclusive."""
    filtered = (r for r in records if start <= r.date <= end and _matches(r, options))
    return compute_result(filtered, options.exclude_fees if options else False)


def sum_by_date(
    records: Iterable[TransactionRecord],
    day: date,
    options: SumOptions | None = None,
) -> SumResult:
    return sum_by_date_range(records, day, day, options)


def sum_by_month(
    records: Iterable[TransactionRecord],
    year: int,
    month: int,
    options: SumOptions | None = None,
) -> SumResult:
    """Sum records for a calendar month (``month`` is 1-12)."""
    last_day = calendar.monthrange(year, month)[1]
    return sum_by_date_range(records, date(year, month, 1), date(year, month, last_day), options)


def sum_by_last_days(
    records: Iterable[TransactionRecord],
    days: int,
    today: date | None = None,
    options: SumOptions | None = None,
) -> SumResult:
    """Sum the last ``days`` days, counting ``today`` as the first of them."""
    end = today or date.today()
    start = end - timedelta(days=days - 1)
    return sum_by_date_range(records, start, end, options)


def sum_by_type(
    records: Iterable[TransactionRecord],
    transaction_type: TransactionType,
    direction: Direction | None = None,
    exclude_fees: bool = False,
) -> SumResult:
    options = SumOptions(direction=direction, transaction_type=transaction_type, exclude_fees=exclude_fees)
    return compute_result((r for r in records if _matches(r, options)), exclude_fees)


def direction_breakdown(
    records: Iterable[TransactionRecord],
    start: date | None = None,
    end: date | None = None,
    transaction_type: TransactionType | None = None,
) -> DirectionBreakdown:
    """Total sent and received amounts, optionally within a date range and type."""
    sent = received = ZERO
    for record in records:
        if start is not None and record.date < start:
            continue
        if end is not None and record.date > end:
            continue
        if transaction_type is not None and record.transaction_type != transaction_type:
            continue
        if record.direction == Direction.SENT:
            sent += record.amount
        else:
            received += record.amount
    return DirectionBreakdown(sent=sent, received=received)
