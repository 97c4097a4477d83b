"""FrozenSetMultimap — immutable mapping where each key holds a set of values.

Used for the prefix-keyed bucket of a pattern table: one literal first
segment can key several wildcard patterns. Values are de-duplicated per key.
"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType


class FrozenSetMultimap:
    """A read-only ``str -> frozenset[str]`` mapping.

    ``len()`` counts keys; ``value_count()`` counts values across all keys.
    ``get`` returns an empty frozenset for a missing key instead of ``None``,
    so callers can distinguish "absent" only through ``in``.
    """

    __slots__ = ("_data", "_value_count")

    def __init__(self, data: dict[str, frozenset[str]] | None = None) -> None:
        frozen = {key: frozenset(values) for key, values in (data or {}).items() if values}
        self._data = MappingProxyType(frozen)
        self._value_count = sum(len(values) for values in frozen.values())

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "FrozenSetMultimap":
        """Build from ``(key, value)`` pairs; repeated pairs collapse."""
        grouped: dict[str, set[str]] = {}
        for key, value in pairs:
            grouped.setdefault(key, set()).add(value)
        return cls({key: frozenset(values) for key, values in grouped.items()})

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getitem__(self, key: str) -> frozenset[str]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrozenSetMultimap):
            return NotImplemented
        return dict(self._data) == dict(other._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenSetMultimap({dict(self._data)!r})"

    def get(self, key: str) -> frozenset[str]:
        return self._data.get(key, frozenset())

    def keys(self) -> Iterable[str]:
        return self._data.keys()

    def items(self) -> Iterable[tuple[str, frozenset[str]]]:
        return self._data.items()

    def values(self) -> Iterator[str]:
        """Yield every value under every key."""
        for values in self._data.values():
            yield from values

    def value_count(self) -> int:
        return self._value_count
