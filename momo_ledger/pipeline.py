"""Batch pipeline: raw SMS bodies in, deduplicated transaction records out."""

import logging
import multiprocessing as mp
from collections.abc import Iterable, Sequence
from datetime import date, time
from functools import partial

from momo_ledger.models import TransactionRecord
from momo_ledger.parsing import build_record
from momo_ledger.store import reconcile

logger = logging.getLogger(__name__)


def _build_all(raws: Sequence[str], today: date, processes: int | None) -> list[TransactionRecord | None]:
    if processes is None or processes <= 1 or len(raws) < 2:
        return [build_record(raw, today) for raw in raws]

    chunksize = max(1, len(raws) // (processes * 4))
    with mp.Pool(processes=processes) as pool:
        return pool.map(partial(build_record, today=today), raws, chunksize=chunksize)


def parse_all(
    raws: Iterable[str],
    today: date | None = None,
    processes: int | None = None,
) -> list[TransactionRecord]:
    """Parse a batch of raw messages and reconcile duplicates.

    Parameters
    ----------
    raws : Iterable[str]
        Raw SMS bodies in any order.
    today : date | None
        Fallback date for messages without a date token. Resolved once
        per batch so every record in it shares the same fallback.
    processes : int | None
        Parse with a process pool of this size. Reconciliation always
        runs in the calling process.

    Returns
    -------
    list[TransactionRecord]
        One record per distinct transaction ID, in first-seen order.
    """
    raws = list(raws)
    today = today or date.today()

    built = _build_all(raws, today, processes)
    parsed = [record for record in built if record is not None]
    records = reconcile(parsed)

    logger.info(
        "Parsed %d messages: %d valid, %d rejected, %d unique transactions",
        len(raws),
        len(parsed),
        len(raws) - len(parsed),
        len(records),
    )
    return records


def _sort_key(record: TransactionRecord) -> tuple[date, time]:
    return (record.date, record.time or time.min)


def newest_first(records: Iterable[TransactionRecord]) -> list[TransactionRecord]:
    """Sort records by date and time, most recent first.

    Records without a time sort as midnight of their date. The sort is
    stable, so ties keep their input order.
    """
    return sorted(records, key=_sort_key, reverse=True)


def sync(
    new_raws: Iterable[str],
    stored: Iterable[TransactionRecord],
    today: date | None = None,
) -> list[TransactionRecord]:
    """Parse newly arrived messages and reconcile them with stored records.

    New observations come first in the merge, so they take precedence
    wherever the merge rules fall back to the first side. Persisting the
    result is left to the caller.
    """
    today = today or date.today()
    new_records = [
        record
        for record in (build_record(raw, today) for raw in new_raws)
        if record is not None
    ]
    stored = list(stored)
    merged = reconcile([*new_records, *stored])

    logger.info(
        "Synced %d new records with %d stored: %d total",
        len(new_records),
        len(stored),
        len(merged),
    )
    return newest_first(merged)
