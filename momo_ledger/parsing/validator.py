"""Cheap first-pass filter for confirmation messages."""

import re

# Upper-case alphanumeric transaction code followed by whitespace, e.g. "DBC1MV31SMJ "
TRANSACTION_CODE_RE = re.compile(r"^([A-Z0-9]+)\s")


def validate(raw: object) -> bool:
    """Return True if ``raw`` looks like a mobile-money confirmation message."""
    if not isinstance(raw, str):
        return False
    return TRANSACTION_CODE_RE.match(raw) is not None
