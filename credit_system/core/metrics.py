"""Prometheus metrics for the credit application service.

Business Metrics:
- credit_applications_total: Credit applications by outcome
- credit_value: Distribution of requested credit values
- credit_lookup_failures_total: Failed credit lookups by reason
- customer_operations_total: Customer writes by operation

Technical Metrics:
- credit_http_requests_total: HTTP requests by route/status
- credit_http_request_latency_seconds: HTTP request latency by route
"""

from decimal import Decimal

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

credit_applications_total = Counter(
    "credit_applications_total",
    "Total number of credit applications",
    ["outcome"],  # accepted, rejected
)

credit_value = Histogram(
    "credit_value",
    "Requested credit value",
    buckets=[100, 500, 1000, 5000, 10000, 50000, 100000],
)

credit_lookup_failures = Counter(
    "credit_lookup_failures_total",
    "Total number of failed credit lookups",
    ["reason"],  # not_found, ownership_mismatch
)

customer_operations_total = Counter(
    "customer_operations_total",
    "Total number of customer write operations",
    ["operation"],  # created, updated, deleted
)


# =============================================================================
# Technical Metrics
# =============================================================================

http_requests_total = Counter(
    "credit_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_application(accepted: bool, value: Decimal | None = None) -> None:
    """Record a credit application in metrics."""
    outcome = "accepted" if accepted else "rejected"
    credit_applications_total.labels(outcome=outcome).inc()

    if accepted and value is not None:
        credit_value.observe(float(value))


def record_credit_lookup_failure(reason: str) -> None:
    """Record a failed credit lookup."""
    credit_lookup_failures.labels(reason=reason).inc()


def record_customer_operation(operation: str) -> None:
    """Record a customer create/update/delete."""
    customer_operations_total.labels(operation=operation).inc()


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
