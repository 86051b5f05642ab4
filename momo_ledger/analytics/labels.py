"""Short display labels for transaction types."""

from momo_ledger.models import TransactionType

TYPE_LABELS: dict[TransactionType, str] = {
    TransactionType.MONEY_TRANSFER: "Transfer",
    TransactionType.WITHDRAWAL: "Withdrawal",
    TransactionType.BILL_PAYMENT: "Bills",
    TransactionType.UTILITY_PAYMENT: "Utility",
    TransactionType.LOAN: "Loan",
    TransactionType.LOAN_REPAYMENT: "Repayment",
    TransactionType.SAVINGS_WITHDRAWAL: "Savings",
    TransactionType.SAVINGS_DEPOSIT: "Savings",
    TransactionType.AIRTIME: "Airtime",
    TransactionType.BUNDLES: "Bundles",
    TransactionType.INSURANCE: "Insurance",
    TransactionType.BETTING: "Betting",
}


def simplify_type(transaction_type: TransactionType) -> str:
    """One-word label, e.g. ``BALANCE_CHECK`` -> ``"Balance"``."""
    label = TYPE_LABELS.get(transaction_type)
    if label:
        return label
    first_word = transaction_type.value.split("_")[0]
    return first_word.capitalize()
