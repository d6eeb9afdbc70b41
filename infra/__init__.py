from .paths import PROJECT_ROOT, STORAGE_DIR, LOG_DIR, DEFAULT_LOGFILE
from .logger import configure_logging, configure_from_settings, get_logger
from .settings import LoggingSettings

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "DEFAULT_LOGFILE",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LoggingSettings",
]
