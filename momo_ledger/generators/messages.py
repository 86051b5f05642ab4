"""Synthetic M-Pesa confirmation messages for tests and benchmarks."""

import re
import string
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from momo_ledger.generators.base import BaseGenerator
from momo_ledger.models import Direction, TransactionType


@dataclass(frozen=True)
class MessageTemplate:
    """Wording of one message family and the classification it should get."""

    transaction_type: TransactionType
    direction: Direction
    body: str
    charged: bool = True


# Placeholders: amount, name, phone, agent, account, business, when, fee, levy, balance
TEMPLATES: tuple[MessageTemplate, ...] = (
    MessageTemplate(
        TransactionType.MONEY_TRANSFER,
        Direction.SENT,
        "Tsh{amount} sent to {name} on {when}.{charges} New balance Tsh{balance}.",
    ),
    MessageTemplate(
        TransactionType.MONEY_TRANSFER,
        Direction.SENT,
        "Tsh{amount} sent to TIPS-NMB for account {account} on {when}.{charges} New balance Tsh{balance}.",
    ),
    MessageTemplate(
        TransactionType.MONEY_TRANSFER,
        Direction.RECEIVED,
        "You have received Tsh{amount} from {phone} - {name} on {when}. New balance Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.WITHDRAWAL,
        Direction.SENT,
        "Tsh{amount} withdrawn from {agent} - {name} on {when}.{charges} New balance Tsh{balance}.",
    ),
    MessageTemplate(
        TransactionType.SAVINGS_WITHDRAWAL,
        Direction.SENT,
        "Withdraw of Tsh{amount} from M-Wekeza account on {when}. New M-Pesa balance is Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.SAVINGS_DEPOSIT,
        Direction.SENT,
        "Tsh{amount} transferred to M-Wekeza account on {when}. New M-Pesa balance is Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.BILL_PAYMENT,
        Direction.SENT,
        "Tsh{amount} paid to LIPA NAMBA {account} - {business} on {when}.{charges} New balance Tsh{balance}.",
    ),
    MessageTemplate(
        TransactionType.UTILITY_PAYMENT,
        Direction.SENT,
        "Tsh{amount} sent to LUKU for account {account} on {when}.{charges} New balance Tsh{balance}.",
    ),
    MessageTemplate(
        TransactionType.LOAN,
        Direction.RECEIVED,
        "You have received loan from SONGESHA of Tsh{amount} on {when}. New M-Pesa balance is Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.LOAN_REPAYMENT,
        Direction.SENT,
        "Tsh{amount} has been deducted from your M-Pesa account for repayment of M-Pesa overdraft "
        "on {when}. New M-Pesa balance is Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.BETTING,
        Direction.SENT,
        "Tsh{amount} sent to BETPAWA for account {account} on {when}.{charges} New balance Tsh{balance}.",
    ),
    MessageTemplate(
        TransactionType.AIRTIME,
        Direction.SENT,
        "You bought Tsh{amount} of airtime on {when}. New balance Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.BUNDLES,
        Direction.SENT,
        "Tsh{amount} paid to VODACOM-BUNDLES on {when}. New balance Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.INSURANCE,
        Direction.SENT,
        "Tsh{amount} paid to VODABIMA for account {account} on {when}. New balance Tsh{balance}.",
        charged=False,
    ),
    MessageTemplate(
        TransactionType.BALANCE_CHECK,
        Direction.SENT,
        "Your M-Pesa balance is Tsh{balance} on {when}.",
        charged=False,
    ),
)

_CHARGES_RE = re.compile(r" (?:Total fee|Government Levy) Tsh[\d,]+(?:\.\d+)?\.")


@dataclass(frozen=True)
class GeneratedMessage:
    """A synthetic message plus the values a correct parse should recover."""

    text: str
    transaction_id: str
    transaction_type: TransactionType
    direction: Direction
    amount: Decimal
    fee: Decimal
    government_levy: Decimal
    balance_after: Decimal
    date: date


class MessageGenerator(BaseGenerator):
    """Generate realistic confirmation SMS bodies for every known message family."""

    ID_ALPHABET = string.ascii_uppercase + string.digits
    ID_LENGTH = 10

    def __init__(self, seed: int | None = None, today: date | None = None) -> None:
        super().__init__(seed)
        self.today = today or date.today()
        self._issued_ids: set[str] = set()

    def generate(self, transaction_type: TransactionType | None = None) -> GeneratedMessage:
        """Generate one message, optionally of a given type."""
        candidates = [t for t in TEMPLATES if transaction_type in (None, t.transaction_type)]
        if not candidates:
            raise ValueError(f"No message template for {transaction_type}")
        template = self.rng.choice(candidates)
        return self._render(template)

    def generate_batch(self, count: int, duplicate_rate: float = 0.0) -> Iterator[GeneratedMessage]:
        """Yield ``count`` messages, some of which repeat an earlier transaction.

        A repeat carries the same transaction ID with the fee and levy
        sentences dropped, the way a gateway re-delivers an abbreviated
        confirmation.
        """
        emitted: list[GeneratedMessage] = []
        for _ in range(count):
            if emitted and self.rng.random() < duplicate_rate:
                yield self.abbreviate(self.rng.choice(emitted))
                continue
            message = self.generate()
            emitted.append(message)
            yield message

    @staticmethod
    def abbreviate(message: GeneratedMessage) -> GeneratedMessage:
        """Copy of ``message`` without its fee and levy sentences."""
        return GeneratedMessage(
            text=_CHARGES_RE.sub("", message.text),
            transaction_id=message.transaction_id,
            transaction_type=message.transaction_type,
            direction=message.direction,
            amount=message.amount,
            fee=Decimal("0"),
            government_levy=Decimal("0"),
            balance_after=message.balance_after,
            date=message.date,
        )

    def _render(self, template: MessageTemplate) -> GeneratedMessage:
        tx_id = self._transaction_id()
        amount = Decimal(self.rng.randrange(500, 2_000_000, 100))
        balance = Decimal(self.rng.randrange(0, 5_000_000)) / 100
        tx_date = self.today - timedelta(days=self.rng.randint(0, 90))

        fee = levy = Decimal("0")
        charges = ""
        if template.charged:
            fee = Decimal(self.rng.randint(10, 5000))
            levy = Decimal(self.rng.randint(0, 500))
            charges = f" Total fee Tsh{fee:,}."
            if levy:
                charges += f" Government Levy Tsh{levy:,}."

        if template.transaction_type == TransactionType.BALANCE_CHECK:
            # The only Tsh figure in the message is the balance itself
            amount = balance

        body = template.body.format(
            amount=f"{amount:,.2f}",
            name=self.person_name(),
            phone="255" + self.digits(9),
            agent=self.digits(7),
            account=self.digits(11),
            business=self.business_name(),
            when=f"{tx_date.day}/{tx_date.month}/{tx_date.year % 100:02d} at {self._clock()}",
            charges=charges,
            balance=f"{balance:,.2f}",
        )

        return GeneratedMessage(
            text=f"{tx_id} Confirmed. {body}",
            transaction_id=tx_id,
            transaction_type=template.transaction_type,
            direction=template.direction,
            amount=amount,
            fee=fee,
            government_levy=levy,
            balance_after=balance,
            date=tx_date,
        )

    def _clock(self) -> str:
        hour = self.rng.randint(1, 12)
        minute = self.rng.randint(0, 59)
        return f"{hour}:{minute:02d} {self.rng.choice(('AM', 'PM'))}"

    def _transaction_id(self) -> str:
        while True:
            tx_id = "".join(self.rng.choices(self.ID_ALPHABET, k=self.ID_LENGTH))
            if tx_id not in self._issued_ids:
                self._issued_ids.add(tx_id)
                return tx_id
