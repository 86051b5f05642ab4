"""Synthetic confirmation-message generators."""

from momo_ledger.generators.examples import DEDUP_SCENARIO, EXAMPLE_SMS
from momo_ledger.generators.messages import (
    TEMPLATES,
    GeneratedMessage,
    MessageGenerator,
    MessageTemplate,
)

__all__ = [
    "DEDUP_SCENARIO",
    "EXAMPLE_SMS",
    "GeneratedMessage",
    "MessageGenerator",
    "MessageTemplate",
    "TEMPLATES",
]
