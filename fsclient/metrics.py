"""
Prometheus metrics for fsclient.

Provides a counter and a histogram per fetch. The host application is
responsible for exposing the prometheus_client registry.
"""

import logging
from prometheus_client import Counter, Histogram

logger = logging.getLogger("fsclient.metrics")

# Total requests counter with method and status code labels.
# Transport failures are recorded with code "error".
REQUEST_COUNT = Counter(
    "fsclient_requests_total",
    "Total number of fsclient requests",
    ["method", "code"],
)

REQUEST_LATENCY = Histogram(
    "fsclient_request_latency_seconds",
    "fsclient request latency in seconds",
    ["method"],
)


def metrics_request(method: str, code: str, latency: float) -> None:
    """
    Record metrics for a fetch.

    Args:
        method: HTTP method (e.g., 'GET')
        code: HTTP status code as a string, or "error"
        latency: Request duration in seconds
    """
    try:
        REQUEST_COUNT.labels(method=method, code=code).inc()
        REQUEST_LATENCY.labels(method=method).observe(latency)
    except Exception as e:
        # Metrics failures should not affect the call
        logger.debug("Failed to record metrics: %s", e)
