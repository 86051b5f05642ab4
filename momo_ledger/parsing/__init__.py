"""Message validation, field extraction and classification."""

from momo_ledger.parsing.builder import build_record
from momo_ledger.parsing.classifier import (
    CHANNEL_RULES,
    DIRECTION_RULES,
    TYPE_RULES,
    Rule,
    classify_type,
    determine_direction,
    infer_channel,
)
from momo_ledger.parsing.validator import validate

__all__ = [
    "CHANNEL_RULES",
    "DIRECTION_RULES",
    "Rule",
    "TYPE_RULES",
    "build_record",
    "classify_type",
    "determine_direction",
    "infer_channel",
    "validate",
]
