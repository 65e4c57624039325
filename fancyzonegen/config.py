"""Application configuration using pydantic-settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def default_config_file() -> Path:
    """Location of custom-layouts.json under the current user's profile."""
    profile = os.environ.get("USERPROFILE") or str(Path.home())
    return (
        Path(profile)
        / "AppData"
        / "Local"
        / "Microsoft"
        / "PowerToys"
        / "FancyZones"
        / "custom-layouts.json"
    )


class Settings(BaseSettings):
    """Generator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FANCYZONEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Input / output file (defaults to the PowerToys location)
    config_file: Path | None = None

    # Output
    indent: int = 2

    # Logging
    log_level: str = "WARNING"

    def resolved_config_file(self) -> Path:
        """Configured file, or the PowerToys default when unset."""
        if self.config_file is not None:
            return self.config_file
        return default_config_file()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
