"""Output sinks for exporting transaction records."""

from momo_ledger.sinks.console import ConsoleSink
from momo_ledger.sinks.json_file import JsonFileSink
from momo_ledger.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
