"""Prometheus-compatible request metrics for the app1 data API.

Metrics live on a private registry so that importing the application in
tests never collides with the process-wide default registry.

Usage:
    from app.observability.metrics import increment_counter, record_histogram

    increment_counter(
        "http_requests_total",
        labels={"method": "GET", "endpoint": "/api/data", "status": "200"},
    )
    record_histogram(
        "http_request_duration_seconds", 0.004,
        labels={"method": "GET", "endpoint": "/api/data"},
    )
"""

from typing import Any, Dict, Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


_registry = CollectorRegistry()

http_requests_total = Counter(
    "app1_http_requests_total",
    "Total number of HTTP requests by method, route and status code",
    ["method", "endpoint", "status"],
    registry=_registry,
)

http_request_duration_seconds = Histogram(
    "app1_http_request_duration_seconds",
    "Duration of HTTP request handling in seconds",
    ["method", "endpoint"],
    registry=_registry,
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, float("inf")),
)


def increment_counter(
    metric_name: str,
    value: float = 1.0,
    labels: Optional[Dict[str, str]] = None,
) -> None:
    """Increment a counter metric.

    Args:
        metric_name: Name of the counter (with or without app1_ prefix)
        value: Amount to increment by (default: 1.0)
        labels: Optional labels as key-value pairs
    """
    labels = labels or {}
    metric = _get_metric(metric_name)
    if metric and isinstance(metric, Counter):
        if labels:
            metric.labels(**labels).inc(value)
        else:
            metric.inc(value)


def record_histogram(
    metric_name: str,
    value: float,
    labels: Optional[Dict[str, str]] = None,
) -> None:
    """Record a histogram observation.

    Args:
        metric_name: Name of the histogram (with or without app1_ prefix)
        value: Value to observe
        labels: Optional labels as key-value pairs
    """
    labels = labels or {}
    metric = _get_metric(metric_name)
    if metric and isinstance(metric, Histogram):
        if labels:
            metric.labels(**labels).observe(value)
        else:
            metric.observe(value)


def get_metrics_registry() -> CollectorRegistry:
    return _registry


def get_metrics_output() -> bytes:
    """Get Prometheus-formatted metrics output."""
    return generate_latest(_registry)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST


def _get_metric(metric_name: str) -> Any:
    """Look up a module-level metric object by name."""
    if metric_name.startswith("app1_"):
        metric_name = metric_name[len("app1_"):]

    return globals().get(metric_name)


__all__ = [
    "increment_counter",
    "record_histogram",
    "get_metrics_registry",
    "get_metrics_output",
    "get_metrics_content_type",
    "http_requests_total",
    "http_request_duration_seconds",
]
