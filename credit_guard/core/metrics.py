"""Prometheus metrics for the CoopCredit Guard service.

Metrics are organized into two categories:

Business Metrics (for the loan committee dashboards):
- credit_guard_predictions_total: Predictions by risk level
- credit_guard_default_probability: Distribution of default probabilities
- credit_guard_history_size: Entries currently in the history log

Technical Metrics (for Engineering/SRE):
- credit_guard_prediction_latency_seconds: Scoring request latency
- credit_guard_invalid_input_total: Rejected applicant records
- credit_guard_analytics_requests_total: Analytics computations
- credit_guard_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

predictions_total = Counter(
    "credit_guard_predictions_total",
    "Total number of loan default predictions made",
    ["risk_level"],  # Low, Medium, High, Critical
)

default_probability_histogram = Histogram(
    "credit_guard_default_probability",
    "Distribution of predicted default probabilities (0-100)",
    buckets=[10, 25, 40, 50, 60, 75, 90, 100],
)

history_size_gauge = Gauge(
    "credit_guard_history_size",
    "Number of entries in the prediction history log",
)


# =============================================================================
# Technical Metrics
# =============================================================================

prediction_latency = Histogram(
    "credit_guard_prediction_latency_seconds",
    "Prediction request latency in seconds",
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

invalid_input_total = Counter(
    "credit_guard_invalid_input_total",
    "Total number of applicant records rejected by validation",
)

analytics_requests_total = Counter(
    "credit_guard_analytics_requests_total",
    "Total number of analytics summaries computed",
)

http_requests_total = Counter(
    "credit_guard_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_guard_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_prediction(risk_level: str, default_probability: int) -> None:
    """Record a prediction in metrics."""
    predictions_total.labels(risk_level=risk_level).inc()
    default_probability_histogram.observe(default_probability)


def record_invalid_input() -> None:
    invalid_input_total.inc()


def record_analytics_request() -> None:
    analytics_requests_total.inc()


def set_history_size(size: int) -> None:
    history_size_gauge.set(size)


@contextmanager
def track_prediction_latency() -> Generator[None, None, None]:
    """Context manager to track prediction latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        prediction_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
