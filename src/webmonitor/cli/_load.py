"""Load a pattern file into a registry for CLI commands."""

import sys

from webmonitor.errors import PatternSourceError
from webmonitor.routing.registry import PatternRegistry
from webmonitor.sources import FilePatternSource


def load_registry(path: str) -> PatternRegistry:
    """Build a registry from *path*, exiting with status 1 on failure."""
    registry = PatternRegistry()
    try:
        registry.reload(FilePatternSource(path))
    except PatternSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return registry
