"""JSON file sink for exporting transaction records."""

import json
import logging
from pathlib import Path
from typing import Any

from momo_ledger.exceptions import SinkError
from momo_ledger.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write records to ``<topic>.json`` (array) or ``<topic>.jsonl`` files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False, lines: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON arrays. Ignored for JSON Lines.
        lines : bool
            Write one JSON object per line instead of a single array.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self.lines = lines
        self._counts: dict[str, int] = {}

    def path_for(self, topic: str) -> Path:
        """Output file for a topic (dots become underscores)."""
        suffix = ".jsonl" if self.lines else ".json"
        return self.output_dir / (topic.replace(".", "_") + suffix)

    def write_batch(self, topic: str, records: list[Any]) -> Path:
        """Write a batch of records, replacing any previous file for the topic."""
        file_path = self.path_for(topic)
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.lines:
                    for item in data:
                        f.write(json.dumps(item, ensure_ascii=False) + "\n")
                elif self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise SinkError(f"Failed to write {file_path}: {e}") from e

        self._counts[topic] = len(records)
        logger.info(
            "Wrote %d records to %s",
            len(records),
            file_path,
            extra={"topic": topic, "path": file_path},
        )
        return file_path

    def close(self) -> None:
        """Log summary."""
        for topic, count in self._counts.items():
            logger.info("JSON output %s: %d records", self.path_for(topic), count)
