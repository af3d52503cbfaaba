"""Environment-driven settings for tsconfig-init."""

from __future__ import annotations

import os
from functools import lru_cache

__all__: list[str] = ["Settings", "get_settings"]

_TRUTHY = {"1", "true", "yes", "on"}


class Settings:  # noqa: D101
    def __init__(self) -> None:
        self.app_env: str = os.getenv("TSINIT_ENV", "development")
        self.log_level: str = os.getenv("TSINIT_LOG_LEVEL", "WARNING").upper()
        self.assume_yes: bool = os.getenv("TSINIT_ASSUME_YES", "").strip().lower() in _TRUTHY


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # noqa: D401
    """Return cached Settings instance."""

    return Settings()
