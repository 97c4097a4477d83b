"""Tests for webmonitor.routing.registry — publish, reload, atomic swap."""

import logging
import threading
from collections.abc import Iterator
from pathlib import Path

import pytest

from webmonitor.config import MonitorConfig
from webmonitor.errors import PatternSourceError
from webmonitor.routing.classifier import UNKNOWN
from webmonitor.routing.registry import PatternRegistry
from webmonitor.routing.table import PatternTable, build_table
from webmonitor.sources import StaticPatternSource


class _FailingSource:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def fetch_patterns(self) -> list[str]:
        raise self.exc


class TestPublish:
    def test_starts_empty(self) -> None:
        registry = PatternRegistry()
        assert registry.count() == 0
        assert registry.classify("/a") == UNKNOWN

    def test_initial_table(self) -> None:
        registry = PatternRegistry(table=build_table(["/a"]))
        assert registry.classify("/a") == "/a"

    def test_publish_replaces_table(self) -> None:
        registry = PatternRegistry()
        old = registry.table
        new = registry.publish(["/a", "/b/{id}"])
        assert registry.table is new
        assert registry.table is not old
        assert old == PatternTable()
        assert registry.count() == 2

    def test_publish_is_wholesale(self) -> None:
        registry = PatternRegistry()
        registry.publish(["/a"])
        registry.publish(["/b"])
        assert registry.classify("/a") == UNKNOWN
        assert registry.classify("/b") == "/b"

    def test_reader_keeps_its_snapshot(self) -> None:
        registry = PatternRegistry()
        registry.publish(["/a"])
        snapshot = registry.table
        registry.publish(["/b"])
        assert "/a" in snapshot
        assert "/b" not in snapshot

    def test_logs_count(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = PatternRegistry()
        with caplog.at_level(logging.INFO, logger="webmonitor.routing"):
            registry.publish(["/a", "/b/{id}", "/*/c"])
        assert "loaded 3 url patterns" in caplog.text

    def test_concurrent_publish_and_classify(self) -> None:
        registry = PatternRegistry()
        registry.publish(["/a/{id}"])
        results: list[str] = []

        def reader() -> None:
            for _ in range(200):
                results.append(registry.classify("/a/1"))

        def writer() -> None:
            for i in range(50):
                registry.publish(["/a/{id}", f"/x{i}"])

        threads = [threading.Thread(target=reader) for _ in range(4)]
        threads.append(threading.Thread(target=writer))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert set(results) == {"/a/{id}"}


class TestReload:
    def test_reload_from_source(self) -> None:
        registry = PatternRegistry()
        table = registry.reload(StaticPatternSource(["/a", "/a/{id}"]))
        assert registry.table is table
        assert registry.classify("/a/9") == "/a/{id}"

    def test_failed_reload_keeps_table(self) -> None:
        registry = PatternRegistry()
        registry.publish(["/a"])
        before = registry.table
        with pytest.raises(PatternSourceError):
            registry.reload(_FailingSource(RuntimeError("db down")))
        assert registry.table is before
        assert registry.classify("/a") == "/a"

    def test_unexpected_failure_is_wrapped(self) -> None:
        registry = PatternRegistry()
        with pytest.raises(PatternSourceError) as exc_info:
            registry.reload(_FailingSource(RuntimeError("db down")))
        assert "db down" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_source_error_passes_through(self) -> None:
        registry = PatternRegistry()
        original = PatternSourceError("patterns.txt", "missing")
        with pytest.raises(PatternSourceError) as exc_info:
            registry.reload(_FailingSource(original))
        assert exc_info.value is original

    def test_failed_reload_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = PatternRegistry()
        with caplog.at_level(logging.ERROR, logger="webmonitor.routing"):
            with pytest.raises(PatternSourceError):
                registry.reload(_FailingSource(RuntimeError("db down")))
        assert "url pattern reload failed" in caplog.text


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("webmonitor")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


@pytest.mark.usefixtures("package_logger")
class TestFromConfig:
    def test_without_file(self) -> None:
        registry = PatternRegistry.from_config(MonitorConfig())
        assert registry.count() == 0

    def test_with_file(self, tmp_path: Path) -> None:
        path = tmp_path / "patterns.txt"
        path.write_text("/a\n/a/{id}\n", encoding="utf-8")
        registry = PatternRegistry.from_config(MonitorConfig(patterns_file=path))
        assert registry.count() == 2
        assert registry.classify("/a/1") == "/a/{id}"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PatternSourceError):
            PatternRegistry.from_config(MonitorConfig(patterns_file=tmp_path / "nope.txt"))

    def test_applies_log_level(self, package_logger: logging.Logger) -> None:
        PatternRegistry.from_config(MonitorConfig(log_level="warning"))
        assert package_logger.level == logging.WARNING

    def test_debug_log_level_enables_breakdown(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "patterns.txt"
        path.write_text("/a\n/a/{id}\n", encoding="utf-8")
        with caplog.at_level(logging.NOTSET, logger="webmonitor.routing"):
            PatternRegistry.from_config(MonitorConfig(patterns_file=path, log_level="debug"))
        assert "1 simple, 0 complicated, 1 prefix-keyed" in caplog.text
