"""Kafka publisher for post lifecycle events.

This module provides the PostEventPublisher class that announces newly
persisted posts to other services. It includes:

- Lazy creation of the Confluent Kafka producer
- Keyed publishing so events of one author stay on one partition
- Delivery callbacks that log broker-side failures
- Flushing of queued events on shutdown
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

from confluent_kafka import KafkaError, KafkaException, Message, Producer

from chatterbox_posts.core.exceptions import PublishError
from chatterbox_posts.core.settings import settings
from chatterbox_posts.models import Post
from chatterbox_posts.schemas.events import PostCreatedEvent

# Configure logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublisherConfig:
    """Immutable configuration for the event publisher."""

    enabled: bool
    bootstrap_servers: str
    client_id: str
    topic: str
    flush_timeout_seconds: float


def load_publisher_config() -> PublisherConfig:
    """Build configuration object from global settings."""

    return PublisherConfig(
        enabled=bool(settings.kafka_enabled and settings.kafka_bootstrap_servers),
        bootstrap_servers=settings.kafka_bootstrap_servers,
        client_id=settings.kafka_client_id,
        topic=settings.post_events_topic,
        flush_timeout_seconds=float(settings.kafka_flush_timeout_seconds),
    )


class PostEventPublisher:
    """Fire-and-forget producer for post events."""

    def __init__(
        self,
        config: PublisherConfig | None = None,
        producer: Producer | None = None,
    ) -> None:
        self.config = config or load_publisher_config()
        self._producer = producer
        self._producer_lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def _ensure_producer(self) -> Producer:
        with self._producer_lock:
            if self._producer is None:
                self._producer = Producer(
                    {
                        "bootstrap.servers": self.config.bootstrap_servers,
                        "client.id": self.config.client_id,
                        "acks": "all",
                    }
                )
        return self._producer

    @staticmethod
    def _on_delivery(err: KafkaError | None, msg: Message) -> None:
        if err is not None:
            logger.error(
                "Post event delivery failed for key %s: %s",
                _decode_key(msg.key()),
                err,
            )
            return
        logger.debug(
            "Post event delivered to %s [%s] at offset %s",
            msg.topic(),
            msg.partition(),
            msg.offset(),
        )

    def publish_post_created(self, post: Post) -> PostCreatedEvent:
        """Queue a ``PostCreated`` event for a persisted post.

        The call returns once the event is handed to the producer's local
        queue; delivery outcome is reported through the delivery callback.

        Args:
            post: The post that was just persisted.

        Returns:
            The event that was queued.

        Raises:
            PublishError: If the publisher is disabled or the producer refuses
                the message.
        """
        if not self.enabled:
            raise PublishError("Post event publishing is disabled")

        event = PostCreatedEvent.from_post(post)
        payload = event.model_dump_json().encode("utf-8")

        try:
            producer = self._ensure_producer()
            producer.produce(
                self.config.topic,
                key=post.username.encode("utf-8"),
                value=payload,
                on_delivery=self._on_delivery,
            )
            producer.poll(0)
        except (KafkaException, BufferError) as exc:
            raise PublishError(f"Could not publish post event: {exc}") from exc

        logger.info(
            "Queued %s event %s for post %s on topic %s",
            event.eventType,
            event.eventId,
            post.post_id,
            self.config.topic,
        )
        return event

    def close(self) -> int:
        """Flush queued events and return how many are still undelivered."""

        with self._producer_lock:
            if self._producer is None:
                return 0
            remaining = self._producer.flush(self.config.flush_timeout_seconds)
            self._producer = None
        if remaining:
            logger.warning("%d post event(s) were not delivered before shutdown", remaining)
        return remaining


def _decode_key(key: Any) -> str | None:
    if isinstance(key, bytes):
        return key.decode("utf-8", errors="replace")
    return key


class _PublisherSingleton:
    """Singleton wrapper for PostEventPublisher."""

    _instance: PostEventPublisher | None = None

    @classmethod
    def get_instance(cls) -> PostEventPublisher:
        """Get or create the singleton publisher instance."""
        if cls._instance is None:
            cls._instance = PostEventPublisher()
        return cls._instance


def get_event_publisher() -> PostEventPublisher:
    """Return a singleton event publisher instance."""
    return _PublisherSingleton.get_instance()
