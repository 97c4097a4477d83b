"""webmonitor — per-endpoint request metrics keyed by url pattern.

Classifies raw request urls into a bounded set of configured route
patterns so latency, error rate, and throughput aggregate by logical
endpoint instead of by high-cardinality url.

Basic usage::

    from webmonitor import PatternRegistry

    registry = PatternRegistry()
    registry.publish(["/api/users", "/api/users/{id}", "/static/**"])
    registry.classify("/api/users/42?expand=1")   # "/api/users/{id}"
    registry.classify("/nope")                    # "unknown"

ASGI integration::

    from webmonitor import RouteMetricsMiddleware
    app = RouteMetricsMiddleware(app, registry)
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "UNKNOWN": "webmonitor.routing.classifier",
    "classify": "webmonitor.routing.classifier",
    "AntPathMatcher": "webmonitor.routing.matcher",
    "SegmentMatcher": "webmonitor.routing.matcher",
    "PatternRegistry": "webmonitor.routing.registry",
    "PatternTable": "webmonitor.routing.table",
    "build_table": "webmonitor.routing.table",
    "count": "webmonitor.routing.table",
    "MonitorConfig": "webmonitor.config",
    "FilePatternSource": "webmonitor.sources",
    "PatternSource": "webmonitor.sources",
    "StaticPatternSource": "webmonitor.sources",
    "EndpointStats": "webmonitor.metrics.stats",
    "MetricsRecorder": "webmonitor.metrics.stats",
    "RouteMetricsMiddleware": "webmonitor.metrics.middleware",
    "ConfigurationError": "webmonitor.errors",
    "PatternSourceError": "webmonitor.errors",
    "WebMonitorError": "webmonitor.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import webmonitor`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_path), name)
