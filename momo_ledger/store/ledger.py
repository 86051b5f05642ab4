"""In-memory transaction ledger keyed by transaction ID."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce

from momo_ledger.models import TransactionRecord
from momo_ledger.store.merge import merge_records

logger = logging.getLogger(__name__)


@dataclass
class TransactionLedger:
    """Accumulation map that collapses repeated observations of a transaction.

    Insertion order is preserved: a transaction keeps the position of its
    first observation.
    """

    _records: dict[str, TransactionRecord] = field(default_factory=dict)
    merged: int = 0
    skipped: int = 0

    def add(self, record: TransactionRecord) -> TransactionRecord | None:
        """Add a record, merging it with any existing record for the same ID.

        Returns the stored (possibly merged) record, or None if the record
        has no transaction ID and was skipped.
        """
        tx_id = record.transaction_id
        if tx_id is None:
            self.skipped += 1
            return None

        existing = self._records.get(tx_id)
        if existing is None:
            self._records[tx_id] = record
        else:
            self._records[tx_id] = merge_records(existing, record)
            self.merged += 1
            logger.debug("Merged duplicate observation of %s", tx_id, extra={"transaction_id": tx_id})
        return self._records[tx_id]

    def extend(self, records: Iterable[TransactionRecord]) -> None:
        """Add each record in order."""
        for record in records:
            self.add(record)

    def get(self, transaction_id: str) -> TransactionRecord | None:
        """Get the reconciled record for a transaction ID."""
        return self._records.get(transaction_id)

    def records(self) -> list[TransactionRecord]:
        """Reconciled records in first-seen order."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._records


def reconcile(records: Iterable[TransactionRecord]) -> list[TransactionRecord]:
    """Collapse records sharing a transaction ID into one canonical record each."""
    ledger = TransactionLedger()
    ledger.extend(records)
    if ledger.merged or ledger.skipped:
        logger.debug(
            "Reconciled %d records (merged=%d, skipped=%d)",
            len(ledger),
            ledger.merged,
            ledger.skipped,
        )
    return ledger.records()


def reconcile_partitioned(records: Iterable[TransactionRecord]) -> list[TransactionRecord]:
    """Group records by transaction ID, then merge within each group.

    Groups are independent of each other, so this form can be spread
    across workers. Produces the same result as :func:`reconcile`.
    """
    groups: dict[str, list[TransactionRecord]] = {}
    for record in records:
        if record.transaction_id is None:
            continue
        groups.setdefault(record.transaction_id, []).append(record)

    return [reduce(merge_records, group) for group in groups.values()]
