"""
Configuration for the Training Load MCP Server.

Settings are read from environment variables, optionally loaded from a
``.env`` file in the working directory.

Environment variables:
    TRAINING_LOAD_TODAY: Fix "today" (YYYY-MM-DD) for the default clock
    MCP_TRANSPORT: stdio, sse or streamable-http (default: stdio)
    LOG_LEVEL: Logging level name (default: INFO)
"""

from datetime import date
from functools import lru_cache
from typing import Any, Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Transport = Literal["stdio", "sse", "streamable-http"]

SUPPORTED_TRANSPORTS: tuple[str, ...] = get_args(Transport)


class Config(BaseSettings):
    """Server settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    training_load_today: date | None = None
    mcp_transport: Transport = "stdio"
    log_level: str = "INFO"

    @field_validator("training_load_today", mode="before")
    @classmethod
    def _blank_date_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("mcp_transport", mode="before")
    @classmethod
    def _normalise_transport(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    def today(self) -> date:
        """Current date, honouring TRAINING_LOAD_TODAY when set."""
        return self.training_load_today or date.today()


@lru_cache
def get_config() -> Config:
    """Get cached settings instance."""
    return Config()
