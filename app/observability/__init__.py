"""Observability helpers for the app1 data API.

Components:
    - logging: Structured logging with structlog and correlation IDs
    - metrics: Prometheus request metrics
    - middleware: Per-request correlation ID, access log and metrics

Usage:
    from app.observability import get_logger

    logger = get_logger(__name__)
    logger.info("data_listed", item_count=3)
"""

from app.observability.logging import (
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)
from app.observability.metrics import (
    get_metrics_registry,
    increment_counter,
    record_histogram,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
    "increment_counter",
    "record_histogram",
    "get_metrics_registry",
]
