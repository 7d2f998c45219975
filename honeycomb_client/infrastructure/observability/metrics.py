"""Prometheus metrics."""

from prometheus_client import Counter, Histogram

api_requests = Counter(
    "honeycomb_api_requests_total",
    "Total number of API request attempts",
    ["method", "status_class"],
)

api_request_retries = Counter(
    "honeycomb_api_request_retries_total",
    "Total number of API request retries",
    ["reason"],
)

api_request_duration_seconds = Histogram(
    "honeycomb_api_request_duration_seconds",
    "Duration of API calls including retries, in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30, 60],
)


def status_class(status_code: int | None) -> str:
    """Bucket a status code as 2xx/4xx/5xx, or 'error' without a response."""
    if status_code is None:
        return "error"
    return f"{status_code // 100}xx"
