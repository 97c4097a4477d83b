"""Pattern sources — where url patterns come from.

A *source* is anything that can produce the current pattern collection:
a fixed list, a text file, a config service. The registry calls
``fetch_patterns()`` at startup and on every reload; a failing source
leaves the published table untouched.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from webmonitor.errors import PatternSourceError


@runtime_checkable
class PatternSource(Protocol):
    """A source that can produce the full pattern collection."""

    def fetch_patterns(self) -> list[str]: ...


class StaticPatternSource:
    """A fixed pattern collection, mostly for tests and embedding."""

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns = tuple(patterns)

    def __repr__(self) -> str:
        return f"StaticPatternSource({len(self._patterns)} patterns)"

    def fetch_patterns(self) -> list[str]:
        return list(self._patterns)


class FilePatternSource:
    """Patterns read from a text file, one per line.

    Blank lines and lines starting with ``#`` are skipped; surrounding
    whitespace is stripped::

        # public api
        /api/users
        /api/users/{id:int}
        /static/**
    """

    __slots__ = ("_encoding", "_path")

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    def __repr__(self) -> str:
        return f"FilePatternSource({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    def fetch_patterns(self) -> list[str]:
        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise PatternSourceError(str(self._path), str(exc)) from exc
        return parse_pattern_lines(text.splitlines())


def parse_pattern_lines(lines: Iterable[str]) -> list[str]:
    """Strip lines and drop blanks and ``#`` comments."""
    patterns: list[str] = []
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            patterns.append(stripped)
    return patterns
