"""Reconciliation of repeated transaction observations."""

from momo_ledger.store.ledger import TransactionLedger, reconcile, reconcile_partitioned
from momo_ledger.store.merge import merge_records

__all__ = ["TransactionLedger", "merge_records", "reconcile", "reconcile_partitioned"]
