#!/usr/bin/env python3
"""Generate a file of synthetic M-Pesa confirmation messages.

The output feeds scripts/parse_messages.py and manual validation.

Usage:
    python scripts/generate_sample_messages.py --count 500 --output local/messages.txt
    python scripts/generate_sample_messages.py --count 100 --duplicate-rate 0.2 --seed 7
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from momo_ledger.generators import MessageGenerator
from momo_ledger.io import save_messages
from momo_ledger.logging import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate synthetic confirmation SMS")
    parser.add_argument("--count", type=int, default=100, help="Number of messages")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--duplicate-rate",
        type=float,
        default=0.1,
        help="Share of messages that re-deliver an earlier transaction",
    )
    parser.add_argument("--output", type=Path, default=Path("local/messages.txt"), help="Output file")
    args = parser.parse_args(argv)

    setup_logging()

    generator = MessageGenerator(seed=args.seed)
    messages = [m.text for m in generator.generate_batch(args.count, args.duplicate_rate)]
    path = save_messages(messages, args.output)

    logger.info("Saved %d messages to %s", len(messages), path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
