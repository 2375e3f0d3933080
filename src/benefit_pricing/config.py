"""Configuration management for benefit pricing."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    clamp_employer_contribution: bool
    log_level: str

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            clamp_employer_contribution=(
                os.getenv("CLAMP_EMPLOYER_CONTRIBUTION", "false").lower() == "true"
            ),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("benefit_pricing").setLevel(settings.log_level)
