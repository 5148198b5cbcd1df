"""Logging configuration for applications embedding natural_content.

The library only creates module loggers; it never installs handlers on
import. Call :func:`configure_logging` from an application entry point to get
console output at the level named by ``NATURAL_CONTENT_LOG_LEVEL``.
"""

from __future__ import annotations

import logging.config
import os
from typing import Any, Dict


def build_logging_config(level: str | None = None) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping for console logging."""

    log_level = (level or os.getenv("NATURAL_CONTENT_LOG_LEVEL", "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
            },
        },
        "loggers": {
            "natural_content": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
        },
    }


def configure_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
