"""Domain models for parsed mobile-money transactions."""

from momo_ledger.models.enums import Channel, Direction, TransactionStatus, TransactionType
from momo_ledger.models.transaction import CURRENCY, TransactionRecord

__all__ = [
    "CURRENCY",
    "Channel",
    "Direction",
    "TransactionRecord",
    "TransactionStatus",
    "TransactionType",
]
