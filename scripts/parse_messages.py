#!/usr/bin/env python3
"""Parse a file of raw M-Pesa SMS bodies and export the reconciled transactions.

Usage:
    python scripts/parse_messages.py --input messages.txt
    python scripts/parse_messages.py --input messages.json --sink json --output-dir output/
    python scripts/parse_messages.py --input messages.txt --sink kafka --topic mpesa.transactions
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from momo_ledger.config import LedgerConfig
from momo_ledger.exceptions import LedgerError, SinkError
from momo_ledger.io import load_messages
from momo_ledger.logging import setup_logging
from momo_ledger.pipeline import newest_first, parse_all

logger = logging.getLogger(__name__)

SINKS = ("console", "json", "kafka")


def create_sink(name: str, config: LedgerConfig, lines: bool = False):
    """Build the sink selected on the command line."""
    if name == "console":
        from momo_ledger.sinks import ConsoleSink

        return ConsoleSink(pretty=config.output.pretty_json)
    if name == "json":
        from momo_ledger.sinks import JsonFileSink

        return JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json, lines=lines)
    if name == "kafka":
        from momo_ledger.sinks import KafkaSink

        return KafkaSink(config.kafka)
    raise SinkError(f"Unknown sink: {name}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse M-Pesa confirmation SMS into transactions")
    parser.add_argument("--input", required=True, type=Path, help="Text file (one message per line) or JSON array")
    parser.add_argument("--sink", choices=SINKS, default="console", help="Output sink (default: console)")
    parser.add_argument("--output-dir", type=Path, help="Directory for the json sink")
    parser.add_argument("--jsonl", action="store_true", help="Write JSON Lines instead of a JSON array")
    parser.add_argument("--topic", help="Kafka topic / output file stem")
    parser.add_argument("--processes", type=int, help="Parse with this many worker processes")
    parser.add_argument("--log-level", help="Log level (default from LOG_LEVEL or INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except LedgerError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.output_dir:
        config.output.json_output_dir = args.output_dir
    if args.topic:
        config.topic = args.topic
    if args.processes:
        config.parser.processes = args.processes

    setup_logging(level=args.log_level or config.log_level)

    try:
        messages = load_messages(args.input)
        records = newest_first(
            parse_all(
                messages,
                today=config.parser.reference_date,
                processes=config.parser.processes,
            )
        )

        sink = create_sink(args.sink, config, lines=args.jsonl)
        sink.write_batch(config.topic, records)
        sink.close()
    except LedgerError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
