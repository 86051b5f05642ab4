"""Field-level merge of two observations of the same transaction."""

from dataclasses import replace
from typing import TypeVar

from momo_ledger.exceptions import ReconciliationError
from momo_ledger.models import TransactionRecord, TransactionStatus, TransactionType

RAW_TEXT_SEPARATOR = " | "

# Types that a more specific classification should override
GENERIC_TYPES = frozenset({TransactionType.MONEY_TRANSFER, TransactionType.UNKNOWN})

T = TypeVar("T")


def _first_present(first: T | None, second: T | None) -> T | None:
    return first if first is not None else second


def _merge_raw_text(first: str, incoming: str) -> str:
    # Either side may already be a joined audit trail
    segments = first.split(RAW_TEXT_SEPARATOR)
    added = False
    for segment in incoming.split(RAW_TEXT_SEPARATOR):
        if segment not in segments:
            segments.append(segment)
            added = True
    return RAW_TEXT_SEPARATOR.join(segments) if added else first


def merge_records(first: TransactionRecord, incoming: TransactionRecord) -> TransactionRecord:
    """Merge ``incoming`` into ``first``.

    Precedence per field:

    - status: CONFIRMED if either side is, else the first side's
    - transaction_type: first side that is not MONEY_TRANSFER/UNKNOWN
    - amount, fee, government_levy: the larger value
    - counterparty_name, counterparty_account, time, balance_after:
      the first non-None value
    - raw_text: both texts joined by ``" | "`` unless already present
    - everything else: the first side's

    ``merge_records(x, x) == x`` for any record.

    Raises
    ------
    ReconciliationError
        If the two records carry different transaction IDs.
    """
    if first.transaction_id != incoming.transaction_id:
        raise ReconciliationError(
            f"Cannot merge {first.transaction_id!r} with {incoming.transaction_id!r}"
        )

    if TransactionStatus.CONFIRMED in (first.status, incoming.status):
        status = TransactionStatus.CONFIRMED
    else:
        status = first.status

    if first.transaction_type not in GENERIC_TYPES:
        transaction_type = first.transaction_type
    elif incoming.transaction_type not in GENERIC_TYPES:
        transaction_type = incoming.transaction_type
    else:
        transaction_type = first.transaction_type

    return replace(
        first,
        status=status,
        transaction_type=transaction_type,
        amount=max(first.amount, incoming.amount),
        fee=max(first.fee, incoming.fee),
        government_levy=max(first.government_levy, incoming.government_levy),
        counterparty_name=_first_present(first.counterparty_name, incoming.counterparty_name),
        counterparty_account=_first_present(first.counterparty_account, incoming.counterparty_account),
        time=_first_present(first.time, incoming.time),
        balance_after=_first_present(first.balance_after, incoming.balance_after),
        raw_text=_merge_raw_text(first.raw_text, incoming.raw_text),
    )
