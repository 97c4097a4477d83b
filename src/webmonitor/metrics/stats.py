"""In-memory per-pattern request statistics."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EndpointStats:
    """Counters for one url pattern at the time of the snapshot."""

    pattern: str
    count: int = 0
    errors: int = 0
    total_seconds: float = 0.0
    max_seconds: float = 0.0

    @property
    def mean_seconds(self) -> float:
        return self.total_seconds / self.count if self.count else 0.0

    @property
    def error_rate(self) -> float:
        return self.errors / self.count if self.count else 0.0

    def add(self, seconds: float, error: bool) -> "EndpointStats":
        """Return a new snapshot with one more request folded in."""
        return EndpointStats(
            pattern=self.pattern,
            count=self.count + 1,
            errors=self.errors + (1 if error else 0),
            total_seconds=self.total_seconds + seconds,
            max_seconds=max(self.max_seconds, seconds),
        )


class MetricsRecorder:
    """Accumulates ``EndpointStats`` per pattern.

    Cardinality is bounded by the configured patterns plus the unknown
    label, never by raw urls.
    """

    __slots__ = ("_error_status", "_lock", "_stats")

    def __init__(self, error_status: int = 500) -> None:
        self._error_status = error_status
        self._lock = threading.Lock()
        self._stats: dict[str, EndpointStats] = {}

    def __len__(self) -> int:
        return len(self._stats)

    def record(self, pattern: str, seconds: float, status: int) -> None:
        error = status >= self._error_status
        with self._lock:
            current = self._stats.get(pattern) or EndpointStats(pattern=pattern)
            self._stats[pattern] = current.add(seconds, error)

    def get(self, pattern: str) -> EndpointStats | None:
        return self._stats.get(pattern)

    def snapshot(self) -> dict[str, EndpointStats]:
        with self._lock:
            return dict(self._stats)

    def reset(self) -> None:
        with self._lock:
            self._stats.clear()
