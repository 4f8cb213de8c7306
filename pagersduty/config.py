"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EVENTS_URL = "https://events.pagerduty.com/generic/2010-04-15/create_event.json"
API_URL = "https://api.pagerduty.com"
API_MEDIA_TYPE = "application/vnd.pagerduty+json;version=2"
TIMEOUT = 30


class Settings(BaseSettings):
    """pagersduty settings from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGERSDUTY_",
        extra="ignore",
    )

    # Events API
    events_url: str = Field(
        default=EVENTS_URL,
        description="Events API endpoint trigger/acknowledge/resolve events are posted to",
    )

    # REST API
    api_url: str = Field(default=API_URL, description="REST API base URL")
    api_media_type: str = Field(
        default=API_MEDIA_TYPE,
        description="Versioned media type sent in the Accept header",
    )
    api_token: str = Field(default="", description="REST API auth token")

    timeout: int = Field(default=TIMEOUT, description="HTTP timeout in seconds")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format_json: bool = Field(
        default=True,
        description="Use JSON logging format (False for human-readable logs)",
    )
