"""Per-endpoint request metrics keyed by classified url pattern.

    EndpointStats -- frozen snapshot of one pattern's counters
    MetricsRecorder -- thread-safe accumulator
    RouteMetricsMiddleware -- ASGI middleware that classifies and records
"""

from webmonitor.metrics.middleware import RouteMetricsMiddleware
from webmonitor.metrics.stats import EndpointStats, MetricsRecorder

__all__ = [
    "EndpointStats",
    "MetricsRecorder",
    "RouteMetricsMiddleware",
]
