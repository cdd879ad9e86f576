"""Centralized client configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files in the working directory: .env, .env.local
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed connection and logging configuration loaded from env and `.env` files.

    Attributes
    ----------
    endpoint : str
        Base URL of the Redfish service; maps from `REDFISH_ENDPOINT`.
    username, password : str | None
        Optional basic-auth credentials; map from `REDFISH_USERNAME` and
        `REDFISH_PASSWORD`.
    insecure : bool
        Skip TLS certificate verification (self-signed BMC certificates);
        maps from `REDFISH_INSECURE`.
    timeout_seconds : float
        Per-request timeout; maps from `REDFISH_TIMEOUT`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    """

    endpoint: str = Field(default="https://localhost", min_length=1, alias="REDFISH_ENDPOINT")
    username: str | None = Field(default=None, alias="REDFISH_USERNAME")
    password: str | None = Field(default=None, alias="REDFISH_PASSWORD")
    insecure: bool = Field(default=False, alias="REDFISH_INSECURE")
    timeout_seconds: float = Field(default=30.0, gt=0, alias="REDFISH_TIMEOUT")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "redfishkit") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["Settings", "load_settings", "settings", "get_logger"]
