"""Segment helpers shared by the table builder, classifier, and matcher."""

import re

from webmonitor.routing.params import placeholder_regex

# Characters that make a pattern (or one of its segments) a wildcard pattern
WILDCARD_MARKERS = ("*", "{")

# Whole segment that spans zero or more path segments
DOUBLE_WILDCARD = "**"

# Wildcard tokens inside one segment: {placeholder}, *, ?
TOKEN_RE = re.compile(r"\{[^/{}]*\}|\*|\?")


def split_segments(value: str) -> list[str]:
    """Split on ``/`` and drop empty segments.

    Examples::

        "/api/users/"  -> ["api", "users"]
        "api//users"   -> ["api", "users"]
        "/"            -> []
    """
    return [part for part in value.split("/") if part]


def has_wildcard(value: str) -> bool:
    """True if *value* contains ``*`` or ``{`` anywhere."""
    return any(marker in value for marker in WILDCARD_MARKERS)


def normalize_path(value: str) -> str:
    """Rejoin the non-empty segments with a leading ``/`` each.

    ``"a//b/"`` and ``"/a/b"`` both become ``"/a/b"``; a value with no
    segments becomes ``""``.
    """
    return "".join(f"/{part}" for part in split_segments(value))


def segment_regex(segment: str) -> str:
    """Translate one pattern segment into a regex fragment.

    ``*`` matches any run of characters inside the segment, ``?`` exactly
    one, and ``{name}`` / ``{name:type}`` the converter's regex. Everything
    else is literal. An unbalanced ``{`` is treated as a literal character.
    """
    parts: list[str] = []
    pos = 0
    for match in TOKEN_RE.finditer(segment):
        parts.append(re.escape(segment[pos : match.start()]))
        token = match.group()
        if token == "*":
            parts.append(r"[^/]*")
        elif token == "?":
            parts.append(r"[^/]")
        else:
            parts.append(f"(?:{placeholder_regex(token[1:-1])})")
        pos = match.end()
    parts.append(re.escape(segment[pos:]))
    return "".join(parts)


def pattern_regex(pattern: str) -> str:
    """Translate a whole pattern into an anchored regex over a normalized path."""
    pieces: list[str] = []
    for segment in split_segments(pattern):
        if segment == DOUBLE_WILDCARD:
            pieces.append(r"(?:/[^/]+)*")
        else:
            pieces.append(f"/{segment_regex(segment)}")
    return "".join(pieces)
