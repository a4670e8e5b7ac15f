"""Logging configuration for the storefront domain.

structlog renders on top of the standard library handlers, so records from
Protean, SQLAlchemy and uvicorn end up in the same sinks as ours.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

from storefront.config import current_environment, get_settings

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_MAX_LOG_BYTES = 10 * 1024 * 1024

# Loggers that are chatty at DEBUG/INFO and add nothing to order traces.
_QUIET_LOGGERS = ("protean", "sqlalchemy.engine")


def get_log_level() -> str:
    """LOG_LEVEL wins; otherwise the level follows the environment."""
    settings = get_settings()
    if settings.log_level:
        return settings.log_level.upper()
    return _LEVEL_BY_ENVIRONMENT.get(current_environment(), "INFO")


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str | None = None, log_dir: str | None = None, log_file_prefix: str = "storefront") -> None:
    """Route records to stdout, ``<prefix>.log`` and ``<prefix>_error.log``."""
    log_level = level or get_log_level()

    log_path = Path(log_dir or get_settings().log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [
        console_handler,
        _rotating_handler(log_path / f"{log_file_prefix}.log", log_level),
        _rotating_handler(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer():
    if current_environment() in ("production", "staging"):
        return structlog.processors.JSONRenderer()
    # Locals stay on so a failed placement shows the item it stopped at.
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
    )


def setup_structlog() -> None:
    """Configure structlog; request-scoped context (method, path) is merged first."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        _renderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, log_dir: str | None = None, log_file_prefix: str = "storefront") -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Add context variables that will be included in all subsequent log messages."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
