"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.paths import config_path

SETTINGS_FILE_NAME = "settings.env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "prompt"

    # Session defaults
    header_message: str = ""
    prompt_string: str = ""
    prompt_only_on_terminal: bool = True
    max_line_length: int = Field(default=64 * 1024, gt=0)

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["json", "console"] = "console"


def load_settings(app_name: Optional[str] = None) -> Settings:
    """
    Build settings backed by the per-user settings file.

    The file lives at ``<config-dir>/<app_name>/settings.env``. When no per-user
    location can be resolved the local ``.env`` is used instead. Missing files
    are ignored by pydantic-settings.
    """
    name = app_name or Settings().app_name
    env_file = config_path(name, SETTINGS_FILE_NAME) or ".env"
    return Settings(_env_file=env_file, app_name=name)


# Global settings instance
settings = Settings()
