"""Prometheus metric definitions for outbound gateway calls."""

from prometheus_client import Counter, Histogram, generate_latest


gateway_requests_total = Counter(
    "gateway_requests_total",
    "Total Black Cat gateway calls by outcome",
    ["operation", "outcome"],
)
gateway_request_duration_seconds = Histogram(
    "gateway_request_duration_seconds",
    "Black Cat gateway call duration seconds",
    ["operation"],
)


def render_metrics() -> bytes:
    """Expose all registered Prometheus metrics in text format."""

    return generate_latest()
