"""Monitor configuration.

MonitorConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from webmonitor.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Monitor configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = MonitorConfig(patterns_file="patterns.txt", error_status=400)
    """

    # Pattern source
    patterns_file: str | Path | None = None

    # Metrics
    unknown_label: str = "unknown"  # Label recorded for requests no pattern matches
    error_status: int = 500  # Responses with status >= this count as errors
    scope_key: str | None = "webmonitor.pattern"  # ASGI scope key for the matched pattern

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not 100 <= self.error_status <= 599:
            msg = f"error_status must be an HTTP status code (100-599), got {self.error_status}"
            raise ConfigurationError(msg)
        if not self.unknown_label:
            msg = "unknown_label must be a non-empty string"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            msg = f"log_level must be one of {allowed}, got {self.log_level!r}"
            raise ConfigurationError(msg)
