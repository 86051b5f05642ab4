"""Load raw message bodies from files."""

import json
import logging
from pathlib import Path

from momo_ledger.exceptions import InputError

logger = logging.getLogger(__name__)


def load_messages(path: str | Path) -> list[str]:
    """Read raw SMS bodies from a file.

    ``.json`` files must hold a JSON array of strings. Any other file is
    read as one message per line; blank lines are ignored.

    Raises
    ------
    InputError
        If the file is missing, unreadable or not in the expected shape.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read messages from {path}: {e}") from e

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise InputError(f"{path} must contain a JSON array of strings")
        messages = data
    else:
        messages = [line.strip() for line in text.splitlines() if line.strip()]

    logger.info("Loaded %d messages from %s", len(messages), path)
    return messages


def save_messages(messages: list[str], path: str | Path) -> Path:
    """Write messages one per line (or as a JSON array for ``.json`` paths)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            json.dump(messages, f, indent=2, ensure_ascii=False)
        else:
            for message in messages:
                f.write(message.replace("\n", " ") + "\n")
    return path
