"""Configuration management using pydantic-settings."""

from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Solr Configuration
    solr_scheme: str = Field(default="http", description="Solr URL scheme")
    solr_host: str = Field(default="localhost", description="Solr host")
    solr_port: int = Field(default=8983, description="Solr port")
    solr_collection: str = Field(
        default="answer",
        description="Solr collection serving question-answering queries",
    )
    solr_qa_field: str = Field(
        default="doctitle",
        description="Document field the qa parser matches questions against",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for a single Solr request",
    )

    # Unanswered Questions
    unanswered_questions_path: Path = Field(
        default=Path("./unanswered_questions.txt"),
        description="Append-only file collecting questions without an answer",
    )

    # Slack Configuration
    slack_bot_token: str | None = Field(None, description="Slack bot user OAuth token")
    slack_app_token: str | None = Field(None, description="Slack app-level token for Socket Mode")

    # Application Configuration
    web_port: int = Field(default=3000, description="Port for the HTTP server")
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )

    @property
    def solr_endpoint(self) -> str:
        """Get the full Solr request handler URL."""
        return f"{self.solr_scheme}://{self.solr_host}:{self.solr_port}/solr/{self.solr_collection}"

    @property
    def slack_enabled(self) -> bool:
        """Whether both Slack tokens are configured."""
        return bool(self.slack_bot_token and self.slack_app_token)

    def validate_slack_config(self) -> None:
        """Validate that Slack tokens are either both set or both unset."""
        if bool(self.slack_bot_token) != bool(self.slack_app_token):
            raise ValueError("Both SLACK_BOT_TOKEN and SLACK_APP_TOKEN are required to enable Slack")


# Global settings instance - lazy loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
