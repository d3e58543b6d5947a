"""Application configuration contract."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from toolspec.errors import ConfigError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")

    # Call logging for Tool.call
    tool_log_max_chars: int = Field(alias="TOOL_LOG_MAX_CHARS", default=2000, ge=0)
    tool_log_redact_keys: str = Field(
        alias="TOOL_LOG_REDACT_KEYS",
        default="access_token,refresh_token,password,api_key,authorization,secret",
    )

    def redact_keys(self) -> frozenset[str]:
        return frozenset(
            key.strip().lower() for key in self.tool_log_redact_keys.split(",") if key.strip()
        )


def validate_settings(settings: Settings) -> None:
    level = settings.log_level.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"invalid LOG_LEVEL: {settings.log_level!r}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
