"""Enumeration types for parsed mobile-money transactions."""

from enum import Enum


class TransactionStatus(str, Enum):
    CONFIRMED = "Confirmed"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class Direction(str, Enum):
    SENT = "SENT"
    RECEIVED = "RECEIVED"


class TransactionType(str, Enum):
    MONEY_TRANSFER = "MONEY_TRANSFER"
    WITHDRAWAL = "WITHDRAWAL"
    BILL_PAYMENT = "BILL_PAYMENT"
    UTILITY_PAYMENT = "UTILITY_PAYMENT"
    LOAN = "LOAN"
    LOAN_REPAYMENT = "LOAN_REPAYMENT"
    SAVINGS_WITHDRAWAL = "SAVINGS_WITHDRAWAL"
    SAVINGS_DEPOSIT = "SAVINGS_DEPOSIT"
    AIRTIME = "AIRTIME"
    BUNDLES = "BUNDLES"
    INSURANCE = "INSURANCE"
    BETTING = "BETTING"
    BALANCE_CHECK = "BALANCE_CHECK"
    OTHER = "OTHER"
    UNKNOWN = "UNKNOWN"


class Channel(str, Enum):
    MOBILE = "M-PESA"
    VISA = "VISA"
    BANK = "BANK"
    AGENT = "AGENT"
    BUSINESS = "BUSINESS"
