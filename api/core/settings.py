"""
Service settings loaded from the environment (and an optional `.env` file).

Example `.env`:
    PORT=8080
    API_MODE=debug
    CORS_ORIGINS=http://localhost:3000,http://127.0.0.1:3000
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_NAME = "danaverse-api"
ENV_FILE = ".env"


class Settings(BaseSettings):
    PORT: int = Field(default=8080, ge=0, le=65535)
    HOST: str = "0.0.0.0"

    # Unset means release, the quiet mode.
    API_MODE: Literal["debug", "release", "test"] = "release"

    # Comma-separated; kept as a string so plain env values parse without JSON.
    CORS_ORIGINS: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_prefix="",
        extra="ignore",
    )

    @property
    def debug(self) -> bool:
        return self.API_MODE == "debug"

    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


def env_file_present() -> bool:
    return Path(ENV_FILE).is_file()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide settings.

    Raises pydantic.ValidationError when PORT or API_MODE is invalid.
    """
    return Settings()
