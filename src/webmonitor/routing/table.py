"""Pattern table — the immutable lookup structure the classifier reads.

``build_table`` partitions a pattern collection into three disjoint
buckets, checked in this order:

    simple       no ``*`` and no ``{`` anywhere; exact-match only
    complicated  first segment contains ``*`` or ``{``
    prefix-keyed literal first segment, wildcard later; keyed by that segment

Tables are never mutated after construction. Reloading builds a new table
and the owner swaps the reference (see ``PatternRegistry``).
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from webmonitor._internal.multimap import FrozenSetMultimap
from webmonitor.routing.segments import has_wildcard, split_segments

PatternKind: TypeAlias = Literal["simple", "complicated", "prefix"]


def partition_key(pattern: str) -> tuple[PatternKind, str | None]:
    """Return the bucket a pattern belongs in, plus its prefix key if any.

    Examples::

        "/api/users"        -> ("simple", None)
        "/*/health"         -> ("complicated", None)
        "/api/users/{id}"   -> ("prefix", "api")

    A pattern without wildcard markers is simple even when it has no
    segments at all (``"/"``), so it can only match by exact equality.
    """
    if not has_wildcard(pattern):
        return "simple", None
    prefix = split_segments(pattern)[0]
    if has_wildcard(prefix):
        return "complicated", None
    return "prefix", prefix


@dataclass(frozen=True, slots=True)
class PatternTable:
    """Three disjoint, read-only pattern buckets.

    Equal pattern collections produce equal tables, so two builds from the
    same input are interchangeable.
    """

    simple: frozenset[str] = frozenset()
    complicated: frozenset[str] = frozenset()
    prefix_keyed: FrozenSetMultimap = field(default_factory=FrozenSetMultimap)

    def __len__(self) -> int:
        return count(self)

    def __iter__(self) -> Iterator[str]:
        """Iterate every pattern in the table, bucket by bucket."""
        yield from self.simple
        yield from self.complicated
        yield from self.prefix_keyed.values()

    def __contains__(self, pattern: object) -> bool:
        if not isinstance(pattern, str):
            return False
        kind, prefix = partition_key(pattern)
        if kind == "simple":
            return pattern in self.simple
        if kind == "complicated":
            return pattern in self.complicated
        return pattern in self.prefix_keyed.get(prefix or "")


def build_table(patterns: Iterable[str]) -> PatternTable:
    """Partition *patterns* into a new ``PatternTable``.

    Never fails: duplicates collapse and an empty collection yields an
    empty table. Has no side effects; publishing the table is the caller's
    job.
    """
    simple: set[str] = set()
    complicated: set[str] = set()
    prefixed: list[tuple[str, str]] = []

    for pattern in patterns:
        kind, prefix = partition_key(pattern)
        if kind == "simple":
            simple.add(pattern)
        elif kind == "complicated":
            complicated.add(pattern)
        else:
            prefixed.append((prefix or "", pattern))

    return PatternTable(
        simple=frozenset(simple),
        complicated=frozenset(complicated),
        prefix_keyed=FrozenSetMultimap.from_pairs(prefixed),
    )


def count(table: PatternTable) -> int:
    """Number of patterns held by *table* (prefix-keyed values, not keys)."""
    return len(table.simple) + len(table.complicated) + table.prefix_keyed.value_count()
