"""Application settings and configuration.

This module defines all configuration options for the Chatterbox post service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatterbox_posts.services.validation import ContentBounds


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="chatterbox-post-service", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=9094, alias="PORT")

    # Document store
    database_url: str = Field(default="sqlite:///./posts.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Kafka producer for post events
    kafka_enabled: bool = Field(default=True, alias="KAFKA_ENABLED")
    kafka_bootstrap_servers: str = Field(
        default="localhost:9092",
        alias="KAFKA_BOOTSTRAP_SERVERS",
    )
    kafka_client_id: str = Field(default="chatterbox-post-service", alias="KAFKA_CLIENT_ID")
    post_events_topic: str = Field(default="chatterbox-post-events", alias="POST_EVENTS_TOPIC")
    kafka_flush_timeout_seconds: float = Field(
        default=5.0,
        alias="KAFKA_FLUSH_TIMEOUT_SECONDS",
    )

    # Content rules
    post_content_min: int = Field(default=5, alias="POST_CONTENT_MIN")
    post_content_max: int = Field(default=100, alias="POST_CONTENT_MAX")

    # Collaborating services
    user_service_username_endpoint: str = Field(
        default="http://localhost:9091/api/users/username/",
        alias="USER_SERVICE_USERNAME_ENDPOINT",
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_content_bounds(self) -> "Settings":
        if self.post_content_min < 1:
            raise ValueError("POST_CONTENT_MIN must be at least 1")
        if self.post_content_min > self.post_content_max:
            raise ValueError("POST_CONTENT_MIN must not exceed POST_CONTENT_MAX")
        return self

    @property
    def content_bounds(self) -> ContentBounds:
        """Return the configured content length bounds.

        Returns:
            Inclusive minimum and maximum content length
        """
        return ContentBounds(minimum=self.post_content_min, maximum=self.post_content_max)


settings = Settings()
