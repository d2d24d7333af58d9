from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""

    # App config
    mission_control_file: str = "MISSION_CONTROL.md"

    # Freedom score reporting
    wins_window_days: int = 7
    wins_limit: int = 5
    history_limit: int = 12

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


def mission_control_path() -> Path:
    """Resolve the status document against the current working directory."""
    return Path.cwd() / get_settings().mission_control_file


settings = get_settings()
