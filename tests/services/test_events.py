"""Tests for the Kafka post event publisher."""

import json
from dataclasses import replace
from unittest.mock import MagicMock

import pytest
from confluent_kafka import KafkaException

from chatterbox_posts.core.exceptions import PublishError
from chatterbox_posts.services import events
from chatterbox_posts.services.events import PostEventPublisher, PublisherConfig


@pytest.fixture
def config() -> PublisherConfig:
    return PublisherConfig(
        enabled=True,
        bootstrap_servers="broker:9092",
        client_id="test-client",
        topic="test-post-events",
        flush_timeout_seconds=1.0,
    )


@pytest.fixture
def mock_producer() -> MagicMock:
    producer = MagicMock()
    producer.flush.return_value = 0
    return producer


def test_publish_post_created_keys_by_username(config, mock_producer, test_post) -> None:
    publisher = PostEventPublisher(config, producer=mock_producer)

    event = publisher.publish_post_created(test_post)

    mock_producer.produce.assert_called_once()
    args, kwargs = mock_producer.produce.call_args
    assert args == ("test-post-events",)
    assert kwargs["key"] == b"alice"
    body = json.loads(kwargs["value"].decode("utf-8"))
    assert body["eventType"] == "PostCreated"
    assert body["postId"] == test_post.post_id
    assert body["username"] == "alice"
    assert body["content"] == "Test post content"
    assert body["eventId"] == event.eventId
    mock_producer.poll.assert_called_once_with(0)


def test_producer_created_lazily_from_config(config, mocker, test_post) -> None:
    producer_cls = mocker.patch.object(events, "Producer")
    publisher = PostEventPublisher(config)

    producer_cls.assert_not_called()
    publisher.publish_post_created(test_post)
    publisher.publish_post_created(test_post)

    producer_cls.assert_called_once_with(
        {"bootstrap.servers": "broker:9092", "client.id": "test-client", "acks": "all"}
    )


@pytest.mark.parametrize("error", [BufferError("queue full"), KafkaException("no broker")])
def test_producer_errors_become_publish_error(config, mock_producer, test_post, error) -> None:
    mock_producer.produce.side_effect = error
    publisher = PostEventPublisher(config, producer=mock_producer)

    with pytest.raises(PublishError):
        publisher.publish_post_created(test_post)


def test_disabled_publisher_refuses(config, mock_producer, test_post) -> None:
    disabled = replace(config, enabled=False)
    publisher = PostEventPublisher(disabled, producer=mock_producer)

    assert publisher.enabled is False
    with pytest.raises(PublishError):
        publisher.publish_post_created(test_post)
    mock_producer.produce.assert_not_called()


def test_delivery_failure_is_logged(caplog) -> None:
    msg = MagicMock()
    msg.key.return_value = b"alice"

    with caplog.at_level("ERROR", logger=events.__name__):
        PostEventPublisher._on_delivery("broker down", msg)

    assert "delivery failed for key alice" in caplog.text


def test_close_flushes_pending_events(config, mock_producer) -> None:
    mock_producer.flush.return_value = 2
    publisher = PostEventPublisher(config, producer=mock_producer)

    assert publisher.close() == 2
    mock_producer.flush.assert_called_once_with(1.0)
    assert publisher.close() == 0


def test_load_publisher_config_reads_settings(monkeypatch) -> None:
    monkeypatch.setattr(events.settings, "kafka_enabled", True)
    monkeypatch.setattr(events.settings, "post_events_topic", "posts-topic")

    config = events.load_publisher_config()

    assert config.enabled is True
    assert config.topic == "posts-topic"
    assert config.bootstrap_servers == events.settings.kafka_bootstrap_servers
