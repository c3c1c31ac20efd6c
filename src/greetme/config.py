"""Runtime configuration for greetme.

Values come from ``GREETME_*`` environment variables (or a local
``.env`` file).  Storage paths are handed to the backend constructors
explicitly; nothing below the CLI layer reads this module.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greetme.exceptions import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["plain", "json"]


class AppConfig(BaseSettings):
    """Environment-driven settings for one greetme process."""

    # Storage
    settings_file: Path = Path("settings.json")
    kv_path: Path = Path("kv.db")
    kv_enabled: bool = True
    """Capability flag for the key-value backend; ``False`` forces the JSON document."""

    # Logging
    log_level: LogLevel = "WARNING"
    log_format: LogFormat = "plain"

    model_config = SettingsConfigDict(
        env_prefix="GREETME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load the process configuration.

    Raises
    ------
    ConfigError
        When a ``GREETME_*`` value cannot be parsed.
    """
    try:
        return AppConfig()
    except ValidationError as exc:
        fields = ", ".join(
            "GREETME_" + str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]
        )
        raise ConfigError(
            f"Invalid configuration: {fields or exc}",
            hint="Check the GREETME_* environment variables and any .env file.",
        ) from exc
