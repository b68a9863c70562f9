"""Configuration management for the LlamaFarm bridge."""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from llamafarm_bridge.endpoints import DEFAULT_SERVER_URL, normalize_base_url, validate_base_url

DEFAULT_STATE_DIR = Path.home() / ".llamafarm" / "moltbot-workspace"


class Settings(BaseSettings):
    """Bridge configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LLAMAFARM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Model server
    server_url: str = Field(default=DEFAULT_SERVER_URL)
    namespace: str = Field(default="moltbot")
    project: str = Field(default="agent")
    model_name: str = Field(default="qwen3-8b", description="Model name exposed to the agent host")
    auto_bootstrap: bool = Field(default=True)
    request_timeout: float = Field(default=30.0)

    # Local state (read from MOLTBOT_STATE_DIR, shared with the agent host)
    state_dir: Path = Field(
        default=DEFAULT_STATE_DIR,
        validation_alias=AliasChoices("MOLTBOT_STATE_DIR", "LLAMAFARM_STATE_DIR"),
    )

    # Logging
    log_dir: Path = Field(default=Path("./logs"))
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "text", "both"] = Field(default="text")

    @field_validator("server_url")
    @classmethod
    def _check_server_url(cls, value: str) -> str:
        error = validate_base_url(value)
        if error:
            raise ValueError(f"{error}: {value!r}")
        return normalize_base_url(value)

    @field_validator("namespace", "project", "model_name")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


def get_settings(**overrides) -> Settings:
    """Get settings instance, with explicit overrides taking precedence over the environment."""
    return Settings(**overrides)
