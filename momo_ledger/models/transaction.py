"""Transaction record parsed from a confirmation message."""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal

from momo_ledger.models.enums import Channel, Direction, TransactionStatus, TransactionType

CURRENCY = "TZS"


@dataclass(frozen=True)
class TransactionRecord:
    """One observation of a mobile-money transaction.

    Records are immutable. Reconciliation produces new records via
    ``dataclasses.replace`` rather than updating in place.
    """

    transaction_id: str | None
    status: TransactionStatus
    direction: Direction
    transaction_type: TransactionType
    amount: Decimal
    channel: Channel
    date: datetime.date
    raw_text: str

    fee: Decimal = Decimal("0")
    government_levy: Decimal = Decimal("0")
    counterparty_name: str | None = None
    counterparty_account: str | None = None  # Bank/utility account reference
    time: datetime.time | None = None
    balance_after: Decimal | None = None  # None means unknown, not zero
    currency: str = field(default=CURRENCY)

    @property
    def total_charges(self) -> Decimal:
        """Operator fee plus government levy."""
        return self.fee + self.government_levy
