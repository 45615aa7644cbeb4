"""Prometheus metrics for projection volume, snapshot failures, and request latency"""

from prometheus_client import Counter, Histogram

# Projection metrics
projection_counter = Counter(
    "flowsight_projection_total",
    "Total cashflow projections served",
    ["only_changes"],  # true | false
)

projection_rows_histogram = Histogram(
    "flowsight_projection_rows",
    "Rows returned per cashflow projection",
    buckets=[0, 10, 50, 100, 366, 1100, 3660],
)

# Data store metrics
snapshot_load_failures_counter = Counter(
    "flowsight_snapshot_load_failures_total",
    "Failed loads of the projection input snapshot",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(only_changes: bool, row_count: int) -> None:
    """Record projection metrics for monitoring request mix and response size"""
    projection_counter.labels(only_changes="true" if only_changes else "false").inc()
    projection_rows_histogram.observe(row_count)
