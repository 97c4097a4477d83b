"""Best-match classification of request urls against a pattern table."""

from webmonitor.routing.matcher import AntPathMatcher, SegmentMatcher
from webmonitor.routing.segments import split_segments
from webmonitor.routing.table import PatternTable

# Returned when no configured pattern matches
UNKNOWN = "unknown"

_DEFAULT_MATCHER = AntPathMatcher()


def classify(
    table: PatternTable,
    url: str | None,
    matcher: SegmentMatcher | None = None,
) -> str:
    """Resolve *url* to the most specific matching pattern in *table*.

    Returns the pattern string, or ``UNKNOWN`` when the url is empty, has an
    empty path, or matches nothing. The query string is ignored.

    Simple patterns are checked first by exact equality. Otherwise the
    candidates are the prefix-keyed patterns under the url's first segment,
    or the complicated patterns when that segment keys nothing. Matching
    candidates are ranked by the matcher's specificity order.
    """
    if not url:
        return UNKNOWN

    path = url.split("?", 1)[0]
    if not path:
        return UNKNOWN

    if path in table.simple:
        return path

    segments = split_segments(path)
    if not segments:
        return UNKNOWN

    prefix = segments[0]
    if prefix in table.prefix_keyed:
        candidates = table.prefix_keyed.get(prefix)
    else:
        candidates = table.complicated

    matcher = matcher or _DEFAULT_MATCHER
    matched = [pattern for pattern in candidates if matcher.matches(pattern, path)]
    if not matched:
        return UNKNOWN
    return min(matched, key=matcher.specificity_order(path))
