"""Structured logging configuration using structlog.

Library modules only call ``structlog.get_logger(__name__)``. Applications that
want the JSON / console setup call :func:`configure_logging` once at startup.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from tmdbwrap.config import settings

SENSITIVE_KEYS = frozenset(
    {
        "token",
        "password",
        "api_key",
        "secret",
        "authorization",
        "session",
        "guest_session_id",
    }
)


def add_log_level(_logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add log level to the event dict."""
    if method_name == "warn":
        # Structlog uses "warn", but we want "warning"
        event_dict["level"] = "warning"
    else:
        event_dict["level"] = method_name
    return event_dict


def censor_sensitive_data(
    _logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Censor sensitive data from log events.

    Request params are logged as dicts, so nested keys are censored too.
    """

    def _censor_value(key: str, value: Any) -> Any:
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            return "***"
        if isinstance(value, dict):
            return {k: _censor_value(k, v) for k, v in value.items()}
        if isinstance(value, list):
            return [_censor_value(key, item) if isinstance(item, dict) else item for item in value]
        return value

    censored: EventDict = {}
    for key, value in event_dict.items():
        censored[key] = _censor_value(key, value)
    return censored


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog and stdlib logging.

    Args:
        level: Log level name. Uses settings.log_level if None.
        json_output: Render JSON lines. Defaults to True in production.
    """
    level_name = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.is_production

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        censor_sensitive_data,
    ]

    if json_output:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("tmdb_id_resolved", kind="movie", tmdb_id=27205)
    """
    return structlog.get_logger(name)
