"""Process-wide logging setup.

INFO and below go to stdout, WARNING and above to stderr. Call
``setup_logging`` once from the app factory; modules just use
``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Mapping


DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED: bool = False


class MaxLevelFilter(logging.Filter):
    """Allow only records up to (and including) ``max_level``."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno <= self.max_level


def build_logging_config(
    *,
    level: str | int = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> Mapping[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "stdout_max_info": {
                "()": MaxLevelFilter,
                "max_level": logging.INFO,
            },
        },
        "formatters": {
            "standard": {
                "format": log_format,
                "datefmt": date_format,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": ["stdout_max_info"],
                "level": "DEBUG",
                "stream": "ext://sys.stdout",
            },
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": "WARNING",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level,
            "handlers": ["stdout", "stderr"],
        },
    }


def setup_logging(*, level: str | int = "INFO", override_existing: bool = False) -> None:
    """Configure logging once per process.

    Repeated calls are a no-op unless ``override_existing`` is set.
    """
    global _CONFIGURED

    if _CONFIGURED and not override_existing:
        return

    if isinstance(level, str):
        level = level.upper()
    logging.config.dictConfig(build_logging_config(level=level))
    _CONFIGURED = True
