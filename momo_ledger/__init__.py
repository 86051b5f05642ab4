"""Parse and reconcile M-Pesa confirmation SMS messages into transaction records."""

from momo_ledger.models import TransactionRecord
from momo_ledger.pipeline import parse_all, sync
from momo_ledger.store import reconcile

__version__ = "0.1.0"

__all__ = ["TransactionRecord", "__version__", "parse_all", "reconcile", "sync"]
