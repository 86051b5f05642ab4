"""Runtime settings for the scripts and sinks, read from the environment."""

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from momo_ledger.exceptions import ConfigurationError


def _env_int(name: str, default: int | None = None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_date(name: str) -> date | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an ISO date (YYYY-MM-DD), got {raw!r}") from e


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in ("1", "true", "yes")


@dataclass
class KafkaConfig:
    """Producer settings passed to confluent-kafka."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    client_id: str = "momo-ledger"

    def to_dict(self) -> dict[str, Any]:
        """Translate to librdkafka property names."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "client.id": self.client_id,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }

    @classmethod
    def from_env(cls) -> "KafkaConfig":
        defaults = cls()
        return cls(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", defaults.bootstrap_servers),
            acks=os.getenv("KAFKA_ACKS", defaults.acks),
            linger_ms=_env_int("KAFKA_LINGER_MS", defaults.linger_ms),
            compression=os.getenv("KAFKA_COMPRESSION", defaults.compression),
        )


@dataclass
class OutputConfig:
    """Where and how the JSON sink writes."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False

    @classmethod
    def from_env(cls) -> "OutputConfig":
        return cls(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_flag("PRETTY_JSON"),
        )


@dataclass
class ParserConfig:
    """Batch parsing settings.

    ``reference_date`` stands in for "today" as the date of undated
    messages, which makes re-processing an old export reproducible.
    """

    processes: int | None = None
    reference_date: date | None = None

    @classmethod
    def from_env(cls) -> "ParserConfig":
        return cls(
            processes=_env_int("PARSER_PROCESSES"),
            reference_date=_env_date("REFERENCE_DATE"),
        )


@dataclass
class LedgerConfig:
    """Top-level settings for momo-ledger."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    topic: str = "mpesa.transactions"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Build every section from environment variables.

        Raises
        ------
        ConfigurationError
            If a numeric or date variable cannot be parsed.
        """
        return cls(
            kafka=KafkaConfig.from_env(),
            output=OutputConfig.from_env(),
            parser=ParserConfig.from_env(),
            topic=os.getenv("LEDGER_TOPIC", "mpesa.transactions"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
