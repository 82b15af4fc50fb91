"""Logging setup for the inventory service.

The service runs as a queue worker and an HTTP process, both under a
process supervisor that collects stdout, so everything goes to a single
stdout handler. structlog formats the lines: JSON in production and staging,
the coloured console renderer elsewhere. Both the level and the renderer
follow the same environment name.
"""

import logging
import os
import sys
from typing import Any

import structlog

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_JSON_ENVIRONMENTS = ("production", "staging")


def current_environment() -> str:
    """Environment name from ENVIRONMENT, falling back to PROTEAN_ENV."""
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level(environment: str | None = None) -> str:
    """LOG_LEVEL when set, otherwise the default level of the environment."""
    environment = environment or current_environment()
    return os.getenv("LOG_LEVEL", _LEVELS.get(environment, "INFO")).upper()


def build_processors(environment: str | None = None) -> list:
    environment = environment or current_environment()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if environment in _JSON_ENVIRONMENTS:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging() -> None:
    """Route stdlib and structlog output to stdout for the current environment."""
    environment = current_environment()
    level = get_log_level(environment)

    handler = logging.StreamHandler(sys.stdout)
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # Protean logs every unit of work commit at INFO
    logging.getLogger("protean").setLevel(max(logging.WARNING, root.level))

    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def add_context(**kwargs: Any) -> None:
    """Bind ``kwargs`` onto every log line until ``clear_context`` is called."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
