"""Agent settings powered by Pydantic BaseSettings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from filefollow.config.constants import DEFAULT_CONFIG_PATH


class AgentSettings(BaseSettings):
    """Environment configuration for locating the agent config file."""

    model_config = SettingsConfigDict(
        env_prefix="FILEFOLLOW_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_path: Path = Path(DEFAULT_CONFIG_PATH)
    json_logs: bool = True


def get_settings() -> AgentSettings:
    """Get a settings instance."""
    return AgentSettings()
