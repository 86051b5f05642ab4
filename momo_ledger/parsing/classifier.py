"""Ordered rule cascades for transaction type, direction and channel.

Each cascade is a tuple of :class:`Rule` evaluated top to bottom; the
first rule whose predicate matches decides the outcome and no later rule
is consulted. The order runs from the most specific message wording to
the most generic and must not be rearranged: several markers overlap
(e.g. "withdraw of ... from M-Wekeza" also contains "withdraw").
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from momo_ledger.models.enums import Channel, Direction, TransactionType


@dataclass(frozen=True)
class Rule:
    """A named ``(predicate, outcome)`` pair."""

    name: str
    predicate: Callable[..., bool]
    outcome: Any


def first_match(rules: tuple[Rule, ...], *args: Any) -> Any:
    """Return the outcome of the first rule whose predicate accepts ``args``.

    Every cascade ends with a catch-all rule, so a value is always returned.
    """
    for rule in rules:
        if rule.predicate(*args):
            return rule.outcome
    raise LookupError("rule cascade has no catch-all rule")


def _has(*markers: str) -> Callable[[str], bool]:
    """Predicate: every marker occurs in the lower-cased text."""
    return lambda lower: all(m in lower for m in markers)


def _has_any(*markers: str) -> Callable[[str], bool]:
    """Predicate: at least one marker occurs in the lower-cased text."""
    return lambda lower: any(m in lower for m in markers)


def _always(*_: Any) -> bool:
    return True


def _balance_only(lower: str) -> bool:
    return "balance is" in lower and "sent" not in lower and "received" not in lower


TYPE_RULES: tuple[Rule, ...] = (
    Rule("savings_withdrawal", _has("withdraw of", "from m-wekeza"), TransactionType.SAVINGS_WITHDRAWAL),
    Rule("withdrawal", _has("withdraw"), TransactionType.WITHDRAWAL),
    Rule("bill_payment", _has("paid to lipa"), TransactionType.BILL_PAYMENT),
    Rule("utility_payment", _has("sent to luku"), TransactionType.UTILITY_PAYMENT),
    Rule("loan_received", _has("received loan from"), TransactionType.LOAN),
    Rule("loan_repayment", _has("repayment of m-pesa overdraft"), TransactionType.LOAN_REPAYMENT),
    Rule("loan_request", _has("loan request at m-pawa"), TransactionType.LOAN),
    Rule("savings_deposit", _has("m-wekeza"), TransactionType.SAVINGS_DEPOSIT),
    Rule("betting", _has("sent to betpawa"), TransactionType.BETTING),
    Rule("airtime", _has("bought", "airtime"), TransactionType.AIRTIME),
    Rule("bundles", _has("vodacom-bundles"), TransactionType.BUNDLES),
    Rule("insurance", _has("vodabima"), TransactionType.INSURANCE),
    Rule("visa_card", _has("m-pesa visa card"), TransactionType.OTHER),
    Rule("outgoing_transfer", _has("sent to"), TransactionType.MONEY_TRANSFER),
    Rule("incoming_transfer", _has_any("received", "receive"), TransactionType.MONEY_TRANSFER),
    Rule("balance_check", _balance_only, TransactionType.BALANCE_CHECK),
    Rule("fallback", _always, TransactionType.OTHER),
)

OUTGOING_MARKERS = (
    "sent to",
    "paid to",
    "withdraw",
    "bought",
    "deducted from your m-pesa account",
)
INCOMING_MARKERS = ("received", "receive", "you have received")

DIRECTION_RULES: tuple[Rule, ...] = (
    Rule("outgoing", _has_any(*OUTGOING_MARKERS), Direction.SENT),
    Rule("incoming", _has_any(*INCOMING_MARKERS), Direction.RECEIVED),
    # Unrecognized wording is recorded as outgoing, with no flag
    Rule("fallback", _always, Direction.SENT),
)

CHANNEL_RULES: tuple[Rule, ...] = (
    Rule("card", lambda t, lower: t == TransactionType.OTHER and "visa" in lower, Channel.VISA),
    Rule("agent", lambda t, lower: t == TransactionType.WITHDRAWAL, Channel.AGENT),
    Rule(
        "business",
        lambda t, lower: t in (TransactionType.BILL_PAYMENT, TransactionType.UTILITY_PAYMENT),
        Channel.BUSINESS,
    ),
    Rule("fallback", _always, Channel.MOBILE),
)


def classify_type(text: str) -> TransactionType:
    """Assign a transaction type using :data:`TYPE_RULES`."""
    return first_match(TYPE_RULES, text.lower())


def determine_direction(text: str) -> Direction:
    """Resolve SENT or RECEIVED using :data:`DIRECTION_RULES`."""
    return first_match(DIRECTION_RULES, text.lower())


def infer_channel(transaction_type: TransactionType, text: str) -> Channel:
    """Infer the settlement channel from the resolved type and text markers."""
    return first_match(CHANNEL_RULES, transaction_type, text.lower())
