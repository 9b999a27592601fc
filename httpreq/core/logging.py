"""
Centralized Logging Configuration.

All modules must use this logging setup. Do not create standalone loggers.

Log records are written to stderr. Standard output is reserved for the
response status line and body, so scripts can pipe it unchanged.

Structured fields in every log record:
    timestamp   - ISO 8601 UTC timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., httpreq.request.executor)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Origin context, bound by the entry point (cli)

Usage:
    from httpreq.core.logging import get_logger, setup_logging

    setup_logging(level="INFO", format_type="console")

    logger = get_logger(__name__)
    logger.info("Request sent", method="GET", url="https://example.test")
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "console"

VALID_FORMATS = frozenset({"console", "json"})

_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to WARNING.
        format_type: Output format ('json' or 'console'). Defaults to console.

    Raises:
        ValueError: If format_type is not a recognized format
    """
    effective_level = level if level is not None else DEFAULT_LEVEL
    effective_format = format_type if format_type is not None else DEFAULT_FORMAT

    if effective_format not in VALID_FORMATS:
        raise ValueError(f"Unknown log format: {effective_format}")

    log_level = getattr(logging, effective_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if effective_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    # httpx logs every request at INFO; only surface it in debug runs.
    library_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
