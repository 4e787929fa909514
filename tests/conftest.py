# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["KAFKA_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

from chatterbox_posts.api.dependencies import get_event_publisher_dep
from chatterbox_posts.core.exceptions import PublishError
from chatterbox_posts.core.settings import Settings
from chatterbox_posts.db.session import Base
from chatterbox_posts.db.session import get_db as app_get_session
from chatterbox_posts.main import app as fastapi_app
from chatterbox_posts.models import Post
from chatterbox_posts.repositories.post_repo import PostRepository
from chatterbox_posts.schemas.events import PostCreatedEvent
from chatterbox_posts.services.post_service import PostService
from chatterbox_posts.services.validation import ContentBounds

TEST_DB_URL = "sqlite://"


class RecordingPublisher:
    """Stand-in for the Kafka publisher that keeps events in memory."""

    def __init__(self) -> None:
        self.enabled = True
        self.fail_with: Exception | None = None
        self.events: list[PostCreatedEvent] = []

    def publish_post_created(self, post: Post) -> PostCreatedEvent:
        if self.fail_with is not None:
            raise self.fail_with
        event = PostCreatedEvent.from_post(post)
        self.events.append(event)
        return event


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def publisher(app: FastAPI) -> Iterator[RecordingPublisher]:
    """Replace the Kafka publisher with an in-memory recorder."""
    recorder = RecordingPublisher()
    app.dependency_overrides[get_event_publisher_dep] = lambda: recorder
    try:
        yield recorder
    finally:
        app.dependency_overrides.pop(get_event_publisher_dep, None)


@pytest.fixture()
def failing_publisher(publisher: RecordingPublisher) -> RecordingPublisher:
    """A recorder whose every publish raises ``PublishError``."""
    publisher.fail_with = PublishError("broker unreachable")
    return publisher


@pytest.fixture()
def client(app: FastAPI, publisher: RecordingPublisher) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide a Settings instance aligned with runtime configuration."""
    return Settings()


@pytest.fixture()
def bounds() -> ContentBounds:
    return ContentBounds(minimum=5, maximum=100)


@pytest.fixture()
def post_repo(db_session: Session) -> PostRepository:
    return PostRepository(db_session)


@pytest.fixture()
def post_service(post_repo: PostRepository, bounds: ContentBounds) -> PostService:
    return PostService(post_repo, bounds)


@pytest.fixture()
def test_post(post_repo: PostRepository) -> Post:
    """Create a baseline post for tests."""
    return post_repo.insert(username="alice", content="Test post content")


@pytest.fixture()
def make_posts(post_repo: PostRepository) -> Any:
    """Return a helper that stores ``count`` posts for ``username``."""

    def _make(username: str, count: int = 1) -> list[Post]:
        return [
            post_repo.insert(username=username, content=f"post number {index}")
            for index in range(count)
        ]

    return _make
