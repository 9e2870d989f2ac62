"""Configuration settings for the Okta API client."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from okta_client import __version__


class LoggingConfig(BaseModel):
    """Configuration for logging behavior.

    Controls file logging, rotation, and output format.
    """

    log_file: str | None = Field(
        default=None,
        description="Optional path for file logging (enables rotation)",
    )
    rotation: str = Field(
        default="10 MB",
        description="When to rotate log file (e.g., '10 MB', '1 day')",
    )
    retention: str = Field(
        default="7 days",
        description="How long to keep rotated logs",
    )
    serialize: bool = Field(
        default=False,
        description="If True, output JSON format to file",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # Okta API
    # --------------------------------------------------------------------------
    okta_api_token: str = Field(
        default="",
        description="Static Okta API token (sent with the SSWS scheme)",
    )
    okta_base_url: str = Field(
        default="",
        description="API base URL, must end with '/' (e.g. https://acme.okta.com/api/v1/)",
    )
    okta_debug: bool = Field(
        default=False,
        description="Dump full request/response text to the log",
    )
    user_agent: str = Field(
        default=f"okta-client-python/{__version__}",
        description="User-Agent header sent with every request",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Default HTTP timeout in seconds for the built-in transport",
    )

    # --------------------------------------------------------------------------
    # Logging
    # --------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration (file output, rotation)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
