"""webmonitor exception hierarchy.

Shared across the registry, sources, config, and CLI so every module
raises and catches the same types. The classification core itself never
raises: unmatched or malformed input resolves to ``"unknown"``.
"""


class WebMonitorError(Exception):
    """Base for all webmonitor-specific errors."""


class ConfigurationError(WebMonitorError):
    """Raised when monitor configuration is invalid.

    Typically raised by ``MonitorConfig`` at construction time.
    """


class PatternSourceError(WebMonitorError):
    """A pattern source could not supply patterns.

    The registry leaves the currently-published table in place when this
    is raised during a reload.
    """

    def __init__(self, source: str, detail: str = "") -> None:
        self.source = source
        self.detail = detail
        message = f"Cannot load url patterns from {source}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
