from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Presentation settings populated from environment variables and .env file.

    The equality tolerance is intentionally absent: it is a fixed constant.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCAST_",
        extra="ignore",
    )

    output_format: Literal["rich", "json", "quiet"] | None = None
    verbose: bool = False
