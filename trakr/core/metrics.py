"""Prometheus metrics for the Trakr service.

Metrics are organized into two categories:

Business Metrics:
- trakr_transactions_applied_total: Transactions added/deleted by type
- trakr_budget_evaluations_total: Budget progress computations
- trakr_budget_over_limit_total: Budget evaluations that were over budget
- trakr_streak_checkins_total: Streak check-ins by outcome

Technical Metrics:
- trakr_record_store_latency_seconds: Record store operation latency
- trakr_record_store_decode_failures_total: Malformed persisted data
- trakr_remote_store_retry_total: Remote store retries
- trakr_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

transactions_applied = Counter(
    "trakr_transactions_applied_total",
    "Transactions applied to the ledger",
    ["operation", "type"],  # added/deleted, income/expense
)

budget_evaluations = Counter(
    "trakr_budget_evaluations_total",
    "Number of budget progress computations",
)

budget_over_limit = Counter(
    "trakr_budget_over_limit_total",
    "Budget progress computations that were over budget",
)

streak_checkins = Counter(
    "trakr_streak_checkins_total",
    "Streak check-ins by outcome",
    ["outcome"],  # continued, reset, already_checked_in
)


# =============================================================================
# Technical Metrics
# =============================================================================

record_store_latency = Histogram(
    "trakr_record_store_latency_seconds",
    "Record store operation latency in seconds",
    ["backend", "operation"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

record_store_decode_failures = Counter(
    "trakr_record_store_decode_failures_total",
    "Persisted values or records that could not be decoded",
    ["key"],
)

remote_store_retries = Counter(
    "trakr_remote_store_retry_total",
    "Total number of remote record store retries",
)

http_requests_total = Counter(
    "trakr_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "trakr_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_transaction_applied(operation: str, transaction_type: str) -> None:
    """Record a transaction add or delete."""
    transactions_applied.labels(operation=operation, type=transaction_type).inc()


def record_budget_evaluation(over_budget: bool) -> None:
    """Record a budget progress computation."""
    budget_evaluations.inc()
    if over_budget:
        budget_over_limit.inc()


def record_streak_checkin(outcome: str) -> None:
    """Record a streak check-in outcome."""
    streak_checkins.labels(outcome=outcome).inc()


def record_decode_failure(key: str) -> None:
    """Record a malformed persisted value or record."""
    record_store_decode_failures.labels(key=key).inc()


def record_remote_store_retry() -> None:
    """Record a remote store retry attempt."""
    remote_store_retries.inc()


@contextmanager
def track_store_latency(backend: str, operation: str) -> Generator[None, None, None]:
    """Context manager to track record store latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        record_store_latency.labels(backend=backend, operation=operation).observe(duration)


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
