from __future__ import annotations

from typing import Any, Dict
import logging
import sys

TIME_FORMAT = "%H:%M:%S"
DEFAULT_FORMAT = "%(asctime)s %(levelprefix)s [%(name)s] %(message)s"
ACCESS_FORMAT = "%(asctime)s %(levelprefix)s %(client_addr)s - \"%(request_line)s\" %(status_code)s"

# Loggers routed to the default handler; uvicorn.access gets its own formatter
_DEFAULT_LOGGERS = ("uvicorn", "uvicorn.error", "backend")


def resolve_level(level: int | str) -> int:
    """Map a level name such as "debug" to its numeric value, falling back to INFO."""
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


def get_log_config(level: int | str = logging.INFO, use_colors: bool | None = None) -> Dict[str, Any]:
    """Return a logging dictConfig shared by uvicorn and the ``backend.*`` loggers.

    Timestamps are HH:MM:SS. Colors follow the terminal unless forced.
    """
    level = resolve_level(level)
    if use_colors is None:
        use_colors = sys.stdout.isatty()

    loggers: Dict[str, Any] = {
        name: {"handlers": ["default"], "level": level, "propagate": False}
        for name in _DEFAULT_LOGGERS
    }
    loggers["uvicorn.access"] = {"handlers": ["access"], "level": level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": DEFAULT_FORMAT,
                "datefmt": TIME_FORMAT,
                "use_colors": use_colors,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_FORMAT,
                "datefmt": TIME_FORMAT,
                "use_colors": use_colors,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
        "root": {"handlers": ["default"], "level": level},
    }
