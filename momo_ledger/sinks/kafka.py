"""Publish reconciled transaction records to Kafka."""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from confluent_kafka import Producer

from momo_ledger.config import KafkaConfig
from momo_ledger.exceptions import SinkError
from momo_ledger.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Delivery counters for one sink."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    failed_keys: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        reported = self.delivered + self.failed
        return self.delivered / reported if reported else 0.0

    @property
    def throughput(self) -> float:
        """Records sent per second over the last batch."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        elapsed = self.end_time - self.start_time
        return self.sent / elapsed if elapsed > 0 else 0.0


class KafkaSink:
    """Publish records as UTF-8 JSON, keyed by transaction ID.

    Every observation of a transaction lands on the same partition, so a
    consumer that reconciles on its side sees them in publish order.

    Parameters
    ----------
    config : KafkaConfig | str
        Producer settings, or just the bootstrap servers.
    """

    KEY_FIELD = "transaction_id"

    def __init__(self, config: KafkaConfig | str) -> None:
        self.config = KafkaConfig(bootstrap_servers=config) if isinstance(config, str) else config
        self.producer = Producer(self.config.to_dict())
        self.stats = ProducerStats()

    def encode(self, record: Any) -> tuple[bytes | None, bytes]:
        """Return the ``(key, value)`` pair published for ``record``."""
        data = to_dict(record)
        key = data.get(self.KEY_FIELD)
        value = json.dumps(data, ensure_ascii=False).encode("utf-8")
        return (key.encode("utf-8") if key else None, value)

    def _on_delivery(self, err: Any, msg: Any) -> None:
        if err is None:
            self.stats.delivered += 1
            return

        self.stats.failed += 1
        key = msg.key().decode("utf-8") if msg.key() else None
        if key:
            self.stats.failed_keys.append(key)
        logger.error("Delivery to %s failed: %s", msg.topic(), err, extra={"transaction_id": key})

    def send(self, topic: str, record: Any) -> None:
        """Queue one record; delivery is confirmed on :meth:`flush`."""
        key, value = self.encode(record)
        self.producer.produce(topic=topic, key=key, value=value, callback=self._on_delivery)
        self.stats.sent += 1
        # Serve delivery callbacks for earlier messages
        self.producer.poll(0)

    def write_batch(self, topic: str, records: list[Any]) -> ProducerStats:
        """Publish ``records`` and block until the producer queue drains."""
        logger.info("Publishing %d records", len(records), extra={"topic": topic})

        self.stats.start_time = time.time()
        for record in records:
            self.send(topic, record)
        self.flush()
        self.stats.end_time = time.time()

        if self.stats.failed:
            logger.warning("%d records were not delivered", self.stats.failed, extra={"topic": topic})
        return self.stats

    def flush(self, timeout: float = 30.0) -> None:
        """Wait for queued messages.

        Raises
        ------
        SinkError
            If messages remain queued once ``timeout`` seconds have passed.
        """
        remaining = self.producer.flush(timeout)
        if remaining:
            raise SinkError(f"{remaining} messages still queued after {timeout:.0f}s flush")

    def close(self) -> None:
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d delivered=%d failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
