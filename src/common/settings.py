"""
Application settings loaded from environment variables.
It centralizes the knobs shared by the marker sinks, logging setup, and demo scripts.
The engine itself never reads settings; only the collaborators around it do.
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str = "time-marker"
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"
    TIME_MARKER_TAG: str = "TimeMarker"
    TIME_MARKER_SINK_LEVEL: str = "INFO"

    @field_validator("TIME_MARKER_TAG")
    @classmethod
    def _tag_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("TIME_MARKER_TAG must not be blank")
        return value.strip()


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings from `.env` and the process environment."""

    if load_env:
        load_dotenv()

    try:
        return Settings.model_validate(dict(os.environ))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
