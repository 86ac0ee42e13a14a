"""
Logging setup for `python -m session_catalog`.

Everything goes to stdout through one format. uvicorn access lines for
quiet paths (`/health` by default) are dropped.
"""

import logging
import logging.config
from typing import Any, Dict, Iterable

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
QUIET_PATHS = ("/health",)


class QuietPathFilter(logging.Filter):
    """Drop access-log records whose request path is in `paths`."""

    def __init__(self, paths: Iterable[str] = QUIET_PATHS):
        super().__init__()
        self.paths = tuple(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn access records carry (client, method, path, http_version, status)
        if isinstance(record.args, tuple) and len(record.args) >= 3:
            path = str(record.args[2]).split("?", 1)[0]
            return path not in self.paths
        return True


def get_logging_config(level: str = "INFO", quiet_paths: Iterable[str] = QUIET_PATHS) -> Dict[str, Any]:
    console = {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stdout"}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"quiet_paths": {"()": QuietPathFilter, "paths": tuple(quiet_paths)}},
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "console": console,
            "access": {**console, "filters": ["quiet_paths"]},
        },
        "loggers": {
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
        },
        "root": {"level": level, "handlers": ["console"]},
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(get_logging_config(level))
