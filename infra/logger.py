from __future__ import annotations

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Union

from infra.paths import DEFAULT_LOGFILE

if TYPE_CHECKING:
    from infra.settings import LoggingSettings

# Simple, centralized logging setup for scripts and tests.
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return jsonlib.dumps(payload, default=str)


def configure_logging(
    level: Union[str, int] = "INFO",
    *,
    json: bool = False,
    logfile: str | Path | None = DEFAULT_LOGFILE,
) -> None:
    """
    Configure the root logger with stdout + optional file handler.

    Args:
        level: Logging level name or int (e.g., "DEBUG", logging.INFO).
        json: Emit JSON lines when True; otherwise a human-friendly format.
        logfile: File path to append logs; set to None to disable file output.
    """
    formatter: logging.Formatter = JsonLineFormatter() if json else logging.Formatter(DEFAULT_FORMAT)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers.append(console)

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    logging.captureWarnings(True)


def configure_from_settings(settings: LoggingSettings) -> None:
    """Apply a LoggingSettings object (see infra.settings)."""
    configure_logging(settings.level, json=settings.json_lines, logfile=settings.logfile)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)


# Usage: from infra.logger import configure_logging, get_logger; configure_logging("DEBUG", logfile=None); log = get_logger(__name__); log.debug("ready")
