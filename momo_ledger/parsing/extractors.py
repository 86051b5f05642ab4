"""Field extractors for M-Pesa confirmation messages.

Every extractor is a pure function of the raw text (the counterparty
extractor also takes the resolved direction). None of them raise on
malformed input: a missing field comes back as its documented absent
value (``Decimal("0")`` for money amounts, ``None`` for everything else
except the date, which falls back to ``today``).
"""

import re
from datetime import date, time
from decimal import Decimal, InvalidOperation

from momo_ledger.models.enums import Direction, TransactionStatus
from momo_ledger.parsing.validator import TRANSACTION_CODE_RE

ZERO = Decimal("0")

# A trailing sentence period is not a decimal point: "Tsh975." -> 975
_NUMBER = r"([\d,]+(?:\.\d+)?)"

AMOUNT_RE = re.compile(r"Tsh" + _NUMBER)
FEE_RE = re.compile(r"Total fee Tsh" + _NUMBER, re.IGNORECASE)
LEVY_RE = re.compile(r"Government levy Tsh" + _NUMBER, re.IGNORECASE)
BALANCE_RE = re.compile(r"balance(?: is)? Tsh" + _NUMBER, re.IGNORECASE)

DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2})\b")
TIME_RE = re.compile(r"\b(\d{1,2}):(\d{2})\s*([AP]M)\b", re.IGNORECASE)

ACCOUNT_RE = re.compile(r"account\s+(\d+)", re.IGNORECASE)
SENT_TO_RE = re.compile(r"sent to\s+(.+?)(?:\s+for\b|\s+on\b|$)", re.IGNORECASE)
PAID_TO_RE = re.compile(r"paid to\s+(.+?)(?:\s+for\b|\s+on\b|$)", re.IGNORECASE)
AGENT_RE = re.compile(r"from\s+(\d+\s-\s.+?)(?:\s+Total\b|\s+on\b|$)", re.IGNORECASE)
FROM_RE = re.compile(r"from\s+(.+?)(?:\s+on\b|\s+New\b|\.$|$)", re.IGNORECASE)


def parse_decimal(token: str) -> Decimal | None:
    """Parse a money token such as ``"16,000.00"`` into a Decimal."""
    try:
        return Decimal(token.replace(",", ""))
    except InvalidOperation:
        return None


def _money(pattern: re.Pattern, text: str) -> Decimal | None:
    match = pattern.search(text)
    if not match:
        return None
    return parse_decimal(match.group(1))


def extract_transaction_id(text: str) -> str | None:
    """Leading alphanumeric transaction code."""
    match = TRANSACTION_CODE_RE.match(text)
    return match.group(1) if match else None


def extract_amount(text: str) -> Decimal:
    """First ``Tsh`` amount in the message, or 0."""
    amount = _money(AMOUNT_RE, text)
    return amount if amount is not None else ZERO


def extract_fees(text: str) -> tuple[Decimal, Decimal]:
    """Return ``(fee, government_levy)``; each is 0 when absent."""
    fee = _money(FEE_RE, text)
    levy = _money(LEVY_RE, text)
    return (fee if fee is not None else ZERO, levy if levy is not None else ZERO)


def extract_balance(text: str) -> Decimal | None:
    """Balance after the transaction, or None when the message has none.

    Accepts both "balance is Tsh..." and "New balance Tsh...".
    """
    return _money(BALANCE_RE, text)


def parse_date(token: str) -> date | None:
    """Normalize a ``D/M/YY`` token to a date in the 2000s."""
    match = DATE_RE.fullmatch(token)
    if not match:
        return None
    return _to_date(*match.groups())


def _to_date(day: str, month: str, year: str) -> date | None:
    try:
        return date(2000 + int(year), int(month), int(day))
    except ValueError:
        return None


def extract_date(text: str, today: date) -> date:
    """Transaction date, falling back to ``today`` when no valid token is found."""
    match = DATE_RE.search(text)
    if match:
        parsed = _to_date(*match.groups())
        if parsed is not None:
            return parsed
    return today


def extract_time(text: str) -> time | None:
    """12-hour clock time such as ``11:37 AM`` or ``2:30pm``."""
    match = TIME_RE.search(text)
    if not match:
        return None

    hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        return None

    hour = hour % 12
    if meridiem == "PM":
        hour += 12
    return time(hour, minute)


def _split_phone_name(value: str) -> str:
    # "1396099 - MILGRETH SAULI MDUDA" -> "MILGRETH SAULI MDUDA"
    parts = value.split(" - ")
    if len(parts) > 1:
        return parts[1].strip()
    return parts[0].strip()


def extract_counterparty(text: str, direction: Direction) -> tuple[str | None, str | None]:
    """Return ``(counterparty_name, counterparty_account)``."""
    name = None
    account = None

    account_match = ACCOUNT_RE.search(text)
    if account_match:
        account = account_match.group(1)

    if direction == Direction.SENT:
        for pattern in (SENT_TO_RE, PAID_TO_RE):
            match = pattern.search(text)
            if match:
                name = match.group(1).strip()
                break
        else:
            match = AGENT_RE.search(text)
            if match:
                name = _split_phone_name(match.group(1))
    else:
        match = FROM_RE.search(text)
        if match:
            name = _split_phone_name(match.group(1))

    return (name or None, account)


def extract_status(text: str) -> TransactionStatus:
    """Literal keyword match; no partial credit."""
    if "Confirmed" in text:
        return TransactionStatus.CONFIRMED
    if "Failed" in text:
        return TransactionStatus.FAILED
    return TransactionStatus.UNKNOWN
