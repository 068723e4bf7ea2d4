"""Configuration Management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FORMCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Document limits
    max_document_bytes: int = Field(
        default=2 * 1024 * 1024, gt=0, description="Max serialized document size"
    )
    max_nesting_depth: int = Field(
        default=64, gt=0, description="Max JSON nesting depth accepted by decode"
    )
    repair_json: bool = Field(
        default=False, description="Attempt to repair malformed JSON on decode"
    )

    # Host defaults
    default_mode: Literal["builder", "renderer", "preview"] = Field(
        default="renderer", description="Mode used when the host does not pick one"
    )
    default_theme: Literal["light", "dark"] = Field(default="light", description="Theme")
    readonly: bool = Field(default=False, description="Start hosts in readonly mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
