"""Structured logging configuration using structlog.

- JSON output in production mode (filterable, parseable)
- Colored console output in development mode (human-readable)
- Correlation IDs for tracing one analysis run across modules

Usage:
    from odds_distribution.monitoring import configure_logging, get_logger

    configure_logging("production")  # or "development"

    log = get_logger()
    log.debug("distribution_calculated", range_count=3)
    log.info("validation_issue_found", kind="negative_probability")
"""

import logging
import sys

import structlog


def configure_logging(mode: str = "development", level: int = logging.INFO) -> None:
    """Configure structlog for the application.

    Args:
        mode: Either "production" (JSON output) or "development" (colored console)
        level: Minimum stdlib log level; core modules log at DEBUG
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if mode == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Logs go to stderr so CLI output on stdout stays clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Wraps a stdlib logger, so library use without configure_logging stays
    silent below WARNING instead of printing to stdout.

    Args:
        name: Logger name (defaults to "odds_distribution")

    Returns:
        Configured structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name or "odds_distribution"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def bind_correlation_id(correlation_id: str) -> None:
    """Bind a correlation ID to all subsequent log events in this context.

    Args:
        correlation_id: Unique identifier for this run (e.g., "analyze_1a2b3c")
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def unbind_correlation_id() -> None:
    """Remove correlation ID from context."""
    structlog.contextvars.unbind_contextvars("correlation_id")
