from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_PYTHON_VERSION, LOG_LEVELS


class Settings(BaseSettings):
    """dockforge settings, read from ``DOCKFORGE_*`` environment variables."""

    log_level: str = "warning"
    log_json: bool = False
    output_dir: str = "."
    default_python_version: str = DEFAULT_PYTHON_VERSION

    model_config = SettingsConfigDict(env_prefix="DOCKFORGE_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only known level names (case-insensitive)"""
        level = v.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return level


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
