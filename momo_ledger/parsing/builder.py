"""Compose extractor and classifier output into a TransactionRecord."""

import logging
from datetime import date

from momo_ledger.models import TransactionRecord
from momo_ledger.parsing.classifier import classify_type, determine_direction, infer_channel
from momo_ledger.parsing.extractors import (
    extract_amount,
    extract_balance,
    extract_counterparty,
    extract_date,
    extract_fees,
    extract_status,
    extract_time,
    extract_transaction_id,
)
from momo_ledger.parsing.validator import validate

logger = logging.getLogger(__name__)


def build_record(raw: str, today: date | None = None) -> TransactionRecord | None:
    """Parse one raw SMS body.

    Parameters
    ----------
    raw : str
        Message text as delivered by the SMS gateway.
    today : date | None
        Fallback date for messages without a date token. Defaults to
        ``date.today()``.

    Returns
    -------
    TransactionRecord | None
        The parsed record, or None when the text is not a confirmation
        message. Rejection is expected for most SMS traffic and is not an
        error.
    """
    if not validate(raw):
        logger.debug("Rejected non-transactional message: %.40r", raw)
        return None

    transaction_id = extract_transaction_id(raw)
    if transaction_id is None:
        return None

    direction = determine_direction(raw)
    transaction_type = classify_type(raw)
    name, account = extract_counterparty(raw, direction)
    fee, levy = extract_fees(raw)

    return TransactionRecord(
        transaction_id=transaction_id,
        status=extract_status(raw),
        direction=direction,
        transaction_type=transaction_type,
        amount=extract_amount(raw),
        channel=infer_channel(transaction_type, raw),
        date=extract_date(raw, today or date.today()),
        raw_text=raw,
        fee=fee,
        government_levy=levy,
        counterparty_name=name,
        counterparty_account=account,
        time=extract_time(raw),
        balance_after=extract_balance(raw),
    )
