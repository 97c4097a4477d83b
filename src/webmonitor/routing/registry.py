"""Pattern registry — owns the currently-published pattern table.

Writers build a complete table off to the side, then publish it with a
single reference assignment. Readers never lock: they always see either
the previous table or the new one, never one under construction.

Free-threading safety:
    - Publication is one attribute store of an immutable ``PatternTable``
    - Reloads are serialized with ``threading.Lock`` (last writer wins)
    - ``classify`` reads ``self._table`` once per call
"""

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from webmonitor.errors import PatternSourceError
from webmonitor.routing.classifier import classify
from webmonitor.routing.matcher import AntPathMatcher, SegmentMatcher
from webmonitor.routing.table import PatternTable, build_table, count

if TYPE_CHECKING:
    from webmonitor.config import MonitorConfig
    from webmonitor.sources import PatternSource

logger = logging.getLogger("webmonitor.routing")


class PatternRegistry:
    """Holds the pattern table used to classify request urls.

    Usage::

        registry = PatternRegistry()
        registry.publish(["/api/users", "/api/users/{id}"])
        registry.classify("/api/users/42")    # "/api/users/{id}"

        registry.reload(FilePatternSource("patterns.txt"))
    """

    __slots__ = ("_lock", "_table", "matcher")

    def __init__(
        self,
        matcher: SegmentMatcher | None = None,
        table: PatternTable | None = None,
    ) -> None:
        self.matcher = matcher or AntPathMatcher()
        self._table = table or PatternTable()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: "MonitorConfig") -> "PatternRegistry":
        """Create a registry, loading ``config.patterns_file`` when set.

        Also applies ``config.log_level`` to the ``webmonitor`` logger.
        """
        from webmonitor.sources import FilePatternSource

        logging.getLogger("webmonitor").setLevel(config.log_level.upper())
        registry = cls()
        if config.patterns_file is not None:
            registry.reload(FilePatternSource(config.patterns_file))
        return registry

    @property
    def table(self) -> PatternTable:
        """The currently-published table."""
        return self._table

    def publish(self, patterns: Iterable[str]) -> PatternTable:
        """Build a table from *patterns* and make it the current one."""
        with self._lock:
            return self._swap(build_table(patterns))

    def reload(self, source: "PatternSource") -> PatternTable:
        """Fetch patterns from *source* and publish them.

        If the source fails, the current table stays published and the
        failure is raised as ``PatternSourceError``.
        """
        with self._lock:
            try:
                patterns = source.fetch_patterns()
            except PatternSourceError:
                logger.exception("url pattern reload failed, keeping %d patterns", count(self._table))
                raise
            except Exception as exc:
                logger.exception("url pattern reload failed, keeping %d patterns", count(self._table))
                raise PatternSourceError(repr(source), str(exc)) from exc
            return self._swap(build_table(patterns))

    def _swap(self, table: PatternTable) -> PatternTable:
        self._table = table
        logger.info("loaded %d url patterns", count(table))
        logger.debug(
            "url patterns: %d simple, %d complicated, %d prefix-keyed under %d prefixes",
            len(table.simple),
            len(table.complicated),
            table.prefix_keyed.value_count(),
            len(table.prefix_keyed),
        )
        return table

    def classify(self, url: str | None) -> str:
        """Classify *url* against the current table."""
        return classify(self._table, url, self.matcher)

    def count(self) -> int:
        return count(self._table)
