"""Configuration management for the Kutt client."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field

DEFAULT_SERVER = "https://kutt.it"


class KuttSettings(BaseSettings):
    """Client configuration, read from KUTT_* environment variables."""

    api_key: Optional[str] = Field(
        default=None,
        description="API key sent in the x-api-key header"
    )

    server: str = Field(
        default=DEFAULT_SERVER,
        description="Base address of the Kutt server"
    )

    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (transport default if not set)"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stderr if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_prefix": "KUTT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_config(**overrides) -> KuttSettings:
    """Load configuration from environment, with explicit overrides."""
    return KuttSettings(**overrides)
