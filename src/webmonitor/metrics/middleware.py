"""ASGI middleware that tags each request with its url pattern.

Wraps any ASGI application. For every HTTP request it classifies the
request target against the registry's current table, times the
downstream call, and records the outcome under the matched pattern::

    registry = PatternRegistry.from_config(config)
    app = RouteMetricsMiddleware(app, registry, config=config)

Downstream code can read the pattern from ``scope[config.scope_key]``.
"""

import logging
import time

from webmonitor._internal.asgi import ASGIApp, HTTPScope, Message, Receive, Scope, Send
from webmonitor.config import MonitorConfig
from webmonitor.metrics.stats import MetricsRecorder
from webmonitor.routing.classifier import UNKNOWN
from webmonitor.routing.registry import PatternRegistry

logger = logging.getLogger("webmonitor.metrics")


class RouteMetricsMiddleware:
    """Classify, time, and record every HTTP request.

    A request that matches no pattern is recorded under
    ``config.unknown_label``. A configured pattern that is literally
    ``"unknown"`` cannot be told apart from no match, so it is relabelled
    the same way. An exception from the wrapped app is recorded as status
    500 even when the response has already started.
    """

    __slots__ = ("_app", "_config", "recorder", "registry")

    def __init__(
        self,
        app: ASGIApp,
        registry: PatternRegistry,
        recorder: MetricsRecorder | None = None,
        config: MonitorConfig | None = None,
    ) -> None:
        self._app = app
        self._config = config or MonitorConfig()
        self.registry = registry
        self.recorder = recorder or MetricsRecorder(error_status=self._config.error_status)

    def _label(self, scope: Scope) -> str:
        pattern = self.registry.classify(HTTPScope.from_scope(scope).url)
        return self._config.unknown_label if pattern == UNKNOWN else pattern

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        pattern = self._label(scope)
        if self._config.scope_key:
            scope[self._config.scope_key] = pattern

        status = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
            await send(message)

        start = time.perf_counter()
        try:
            await self._app(scope, receive, send_wrapper)
        except BaseException:
            status = 500
            raise
        finally:
            elapsed = time.perf_counter() - start
            self.recorder.record(pattern, elapsed, status)
            logger.debug(
                "%s %s -> %s %d (%.4fs)",
                scope.get("method", ""),
                scope.get("path", ""),
                pattern,
                status,
                elapsed,
            )
