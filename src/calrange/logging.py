"""Logging configuration for calrange."""

import logging

import structlog


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger."""
    return structlog.get_logger(name)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure calrange logging.

    Range generation, extension and navigation log at DEBUG, so pass
    level="DEBUG" to see every produced range.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output (production), False for console
    """
    log_level = getattr(logging, level.upper())
    logging.basicConfig(format="%(message)s", level=log_level)

    shared_processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
