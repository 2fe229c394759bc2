"""Runtime settings for the explorer, read from the environment / a .env file."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from .paths import DEFAULT_LOGFILE

_TRUTHY = {"1", "true", "yes", "on"}


class ExplorerSettings(BaseModel):
    log_level: str = "WARNING"
    log_json: bool = False
    log_to_file: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def logfile(self) -> Path | None:
        return DEFAULT_LOGFILE if self.log_to_file else None

    @classmethod
    def from_env(cls) -> "ExplorerSettings":
        """Build settings from EXPLORER_* variables (a local .env is loaded first)."""
        load_dotenv()
        return cls(
            log_level=os.getenv("EXPLORER_LOG_LEVEL", "WARNING"),
            log_json=os.getenv("EXPLORER_LOG_JSON", "").strip().lower() in _TRUTHY,
            log_to_file=os.getenv("EXPLORER_LOG_TO_FILE", "").strip().lower() in _TRUTHY,
        )
