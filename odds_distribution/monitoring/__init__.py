"""Monitoring module for structured logging.

- Structured JSON logging for production
- Human-readable console output for development
- Correlation IDs for tracing one analysis run
"""

from odds_distribution.monitoring.logging import (
    configure_logging,
    get_logger,
    bind_correlation_id,
    unbind_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_correlation_id",
    "unbind_correlation_id",
]
