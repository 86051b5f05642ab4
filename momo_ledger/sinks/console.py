"""Print records to stdout for inspection during development."""

import json
import sys
from typing import Any, TextIO

from momo_ledger.sinks.serialization import to_dict

RULE = "=" * 60


class ConsoleSink:
    """Dump each batch as JSON under a ``topic (n records)`` header.

    Parameters
    ----------
    pretty : bool
        Indent each record instead of printing one per line.
    max_records : int | None
        Print at most this many records per batch; the rest are counted.
    stream : TextIO | None
        Destination, stdout by default.
    """

    def __init__(self, pretty: bool = True, max_records: int | None = None, stream: TextIO | None = None) -> None:
        self.pretty = pretty
        self.max_records = max_records
        self.stream = stream
        self._counts: dict[str, int] = {}

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream or sys.stdout)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        self._print()
        self._print(RULE)
        self._print(f"{topic} ({len(records)} records)")
        self._print(RULE)

        shown = records if self.max_records is None else records[: self.max_records]
        indent = 2 if self.pretty else None
        for record in shown:
            self._print(json.dumps(to_dict(record), indent=indent, ensure_ascii=False))

        hidden = len(records) - len(shown)
        if hidden:
            self._print(f"... and {hidden} more records")

        self._counts[topic] = self._counts.get(topic, 0) + len(records)

    def close(self) -> None:
        """Print per-topic totals."""
        self._print()
        self._print(RULE)
        self._print("Console Sink Summary")
        self._print(RULE)
        for topic, count in self._counts.items():
            self._print(f"  {topic}: {count} records")
