"""Environment-driven settings for scripts that drive the ecosystem package."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from infra.paths import DEFAULT_LOGFILE

_TRUTHY = {"1", "true", "yes", "on"}
_NO_FILE = {"", "none", "off", "-"}


class LoggingSettings(BaseModel):
    """
    Logging options, usually read from the environment (or a .env file).

    Variables:
        ECOSYSTEM_LOG_LEVEL: Level name, e.g. "DEBUG" (default: "INFO")
        ECOSYSTEM_LOG_JSON: Emit JSON lines when truthy (default: off)
        ECOSYSTEM_LOG_FILE: Log file path; "none" disables file output
    """
    level: str = "INFO"
    json_lines: bool = False
    logfile: Path | None = DEFAULT_LOGFILE

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        # getLevelName returns an int only for registered level names.
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown logging level '{value}'")
        return name

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "LoggingSettings":
        if dotenv:
            load_dotenv()

        logfile_raw = os.getenv("ECOSYSTEM_LOG_FILE")
        if logfile_raw is None:
            logfile = DEFAULT_LOGFILE
        elif logfile_raw.strip().lower() in _NO_FILE:
            logfile = None
        else:
            logfile = Path(logfile_raw)

        return cls(
            level=os.getenv("ECOSYSTEM_LOG_LEVEL", "INFO"),
            json_lines=os.getenv("ECOSYSTEM_LOG_JSON", "").strip().lower() in _TRUTHY,
            logfile=logfile,
        )
