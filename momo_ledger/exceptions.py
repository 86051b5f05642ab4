"""Custom exception hierarchy for momo-ledger.

Message parsing never raises these for malformed SMS text; rejected
messages are simply absent from the output.
"""


class LedgerError(Exception):
    """Base exception for all momo-ledger errors."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class ReconciliationError(LedgerError):
    """Raised when records with different transaction IDs are merged."""


class InputError(LedgerError):
    """Raised when a message source cannot be read."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""
