"""Structured logging configuration using structlog.

Console output is human-readable and colored; JSON output is meant for CI
log collection.

Usage:
    from raw_preview_check.core.logging import setup_logging, get_logger

    setup_logging()

    logger = get_logger(__name__)
    logger.info("fixture_downloaded", file_name="x.NEF")
"""

import logging
import sys

import structlog
from structlog.types import Processor


def get_log_level(level_name: str) -> int:
    """Convert log level name to logging constant."""
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return levels.get(level_name.upper(), logging.INFO)


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structured logging for the harness.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format - 'console' or 'json'
    """
    level = get_log_level(log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
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

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    _configure_library_loggers(level)


def _configure_library_loggers(app_level: int) -> None:
    """Set appropriate log levels for third-party libraries."""
    # Every request would otherwise be logged at INFO
    noisy_loggers = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    min_level = max(logging.WARNING, app_level)

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(min_level)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A bound logger instance with structured logging capabilities

    Example:
        logger = get_logger(__name__)
        logger.warning("fixture_unavailable", file_name="x.NEF", reason="digest_mismatch")
    """
    return structlog.stdlib.get_logger(name)
