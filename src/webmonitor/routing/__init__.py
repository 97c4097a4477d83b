"""Routing — url pattern tables and best-match classification.

Patterns are partitioned into an immutable lookup table at build time;
classification reads the table without locking.
"""

from webmonitor.routing.classifier import UNKNOWN, classify
from webmonitor.routing.matcher import AntPathMatcher, SegmentMatcher
from webmonitor.routing.registry import PatternRegistry
from webmonitor.routing.table import PatternTable, build_table, count

__all__ = [
    "UNKNOWN",
    "AntPathMatcher",
    "PatternRegistry",
    "PatternTable",
    "SegmentMatcher",
    "build_table",
    "classify",
    "count",
]
