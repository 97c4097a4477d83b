"""Segment matcher — structural pattern matching and specificity ordering.

The classifier depends only on the ``SegmentMatcher`` protocol. The default
``AntPathMatcher`` implements Ant-style semantics:

    *          any run of characters inside one segment
    ?          exactly one character inside one segment
    **         (whole segment) zero or more whole segments
    {name}     one non-empty segment
    {name:int} one segment of digits (also ``str``, ``float``, ``path``)

``{name:path}`` may span segments. Empty segments are ignored on both sides,
so ``/a/b/`` and ``a/b`` match the same patterns.
"""

import functools
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from webmonitor.routing.segments import (
    DOUBLE_WILDCARD,
    TOKEN_RE,
    normalize_path,
    pattern_regex,
    split_segments,
)

# Sort key produced by a specificity ordering; smaller sorts first
SpecificityKey: TypeAlias = Callable[[str], Any]


@runtime_checkable
class SegmentMatcher(Protocol):
    """Protocol for pattern matchers used by the classifier.

    Any glob or template matcher can be plugged in as long as it provides
    these two operations::

        class ExactMatcher:
            def matches(self, pattern: str, path: str) -> bool:
                return pattern == path

            def specificity_order(self, path: str) -> SpecificityKey:
                return lambda pattern: pattern
    """

    def matches(self, pattern: str, path: str) -> bool: ...

    def specificity_order(self, path: str) -> SpecificityKey: ...


@dataclass(frozen=True, slots=True)
class PatternInfo:
    """Wildcard statistics of one pattern, used to rank matches.

    ``length`` counts each placeholder as a single character so that
    ``/users/{user_id}`` and ``/users/{id}`` rank the same.
    """

    pattern: str
    uri_vars: int
    single_wildcards: int
    double_wildcards: int
    length: int
    least_specific: bool
    prefix_pattern: bool

    @classmethod
    def of(cls, pattern: str) -> "PatternInfo":
        uri_vars = 0
        stars: list[int] = []
        for match in TOKEN_RE.finditer(pattern):
            token = match.group()
            if token.startswith("{"):
                uri_vars += 1
            elif token == "*":
                stars.append(match.start())
        double = 0
        single = 0
        i = 0
        while i < len(stars):
            if i + 1 < len(stars) and stars[i + 1] == stars[i] + 1:
                double += 1
                i += 2
            else:
                single += 1
                i += 1
        segments = split_segments(pattern)
        return cls(
            pattern=pattern,
            uri_vars=uri_vars,
            single_wildcards=single,
            double_wildcards=double,
            length=len(TOKEN_RE.sub(_collapse_placeholder, pattern)),
            least_specific=segments == [DOUBLE_WILDCARD],
            prefix_pattern=bool(segments) and segments[-1] == DOUBLE_WILDCARD,
        )

    @property
    def total_count(self) -> int:
        return self.uri_vars + self.single_wildcards + 2 * self.double_wildcards


def _collapse_placeholder(match: re.Match[str]) -> str:
    token = match.group()
    return "#" if token.startswith("{") else token


# Per-pattern cache size; several times a typical pattern table
CACHE_SIZE = 4096


@functools.lru_cache(maxsize=CACHE_SIZE)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern_regex(pattern))


@functools.lru_cache(maxsize=CACHE_SIZE)
def _pattern_info(pattern: str) -> PatternInfo:
    return PatternInfo.of(pattern)


class AntPathMatcher:
    """Default ``SegmentMatcher`` with Ant-style wildcard semantics.

    Compiled regexes and wildcard statistics are memoized per pattern string
    in bounded LRU caches (``CACHE_SIZE`` entries each), so patterns dropped
    by a reload age out. Nothing is cached per path. Stateless and safe to
    share across threads.

    Usage::

        matcher = AntPathMatcher()
        matcher.matches("/users/{id}", "/users/42")        # True
        order = matcher.specificity_order("/users/42")
        min(["/users/*", "/users/{id}"], key=order)        # "/users/{id}"
    """

    __slots__ = ()

    def pattern_info(self, pattern: str) -> PatternInfo:
        return _pattern_info(pattern)

    def matches(self, pattern: str, path: str) -> bool:
        """True if *pattern* structurally matches the whole of *path*."""
        return _compile(pattern).fullmatch(normalize_path(path)) is not None

    def specificity_order(self, path: str) -> SpecificityKey:
        """Sort key ranking patterns that match *path*, most specific first.

        First difference wins:

        1. ``/**`` alone ranks last.
        2. A pattern identical to *path* ranks first.
        3. Patterns ending in ``/**`` rank after all others, longer first
           among themselves.
        4. Fewer wildcards (placeholders + ``*`` + 2 x ``**``).
        5. Longer pattern (placeholders count as one character).
        6. Fewer single ``*``.
        7. Fewer placeholders.
        8. Pattern string, so distinct patterns never tie.
        """

        def key(pattern: str) -> tuple[Any, ...]:
            info = self.pattern_info(pattern)
            return (
                info.least_specific,
                pattern != path,
                info.prefix_pattern,
                -info.length if info.prefix_pattern else 0,
                info.total_count,
                -info.length,
                info.single_wildcards,
                info.uri_vars,
                pattern,
            )

        return key
