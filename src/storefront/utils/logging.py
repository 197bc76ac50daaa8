"""Logging for the storefront.

structlog produces the events; stdlib handlers deliver them. Every record,
including those from uvicorn, protean and passlib, is rendered by the same
structlog processor chain: coloured console lines in development, JSON in
production and staging. Files rotate under ``logs/``::

    logs/swiftcart.log        everything at the configured level
    logs/swiftcart_error.log  ERROR and above

The level comes from ``LOG_LEVEL`` when set, otherwise from the environment
name (``ENV``, ``ENVIRONMENT`` or ``PROTEAN_ENV``).
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_FILE_PREFIX = "swiftcart"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
_JSON_ENVIRONMENTS = ("production", "staging")
_QUIET_LOGGERS = ("urllib3", "asyncio", "passlib", "httpx", "uvicorn.access")


def current_environment() -> str:
    name = os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV")
    return (name or "development").lower()


def get_log_level() -> str:
    default = _LEVEL_BY_ENVIRONMENT.get(current_environment(), "INFO")
    return os.getenv("LOG_LEVEL", default).upper()


def _shared_processors() -> list:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]


def _render_chain() -> list:
    if current_environment() in _JSON_ENVIRONMENTS:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    # ConsoleRenderer formats exceptions itself
    console = structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
    )
    return [console]


def _file_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: str = "logs") -> None:
    """Attach console and rotating file handlers to the root logger."""
    level = get_log_level()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *_render_chain()],
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    handlers = [
        console,
        _file_handler(log_path / f"{LOG_FILE_PREFIX}.log", level),
        _file_handler(log_path / f"{LOG_FILE_PREFIX}_error.log", logging.ERROR),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = handlers
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str = "logs") -> None:
    setup_stdlib_logging(log_dir)
    setup_structlog()


def add_context(**kwargs: Any) -> None:
    """Bind values onto every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
