"""Logging configuration using structlog.

Client events are structlog events on top of stdlib loggers named after the
module (``leetify.client``), so the application's ``logging`` levels and
handlers decide whether anything is written. Applications that want
structured output call :func:`setup_logging` once at startup; the library
never configures logging on import.
"""

import logging
from typing import Any, Optional

import structlog

from .config import get_global_settings


def setup_logging(log_level: Optional[str] = None, json_logs: bool = True) -> None:
    """
    Configure structlog for the client's request events.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
        defaults to the LEETIFY_LOG_LEVEL setting
    :param json_logs: Render JSON lines; otherwise use the console renderer
    """
    if log_level is None:
        log_level = get_global_settings().log_level
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)

    # httpx logs every request at INFO, which duplicates leetify_request
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structlog logger backed by the stdlib logger ``name``.

    :param name: Logger name (usually __name__)
    :returns: Lazily bound logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=name.rsplit(".", 1)[-1],
    )
