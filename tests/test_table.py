"""Tests for webmonitor.routing.table — pattern partitioning and counting."""

import pytest

from webmonitor._internal.multimap import FrozenSetMultimap
from webmonitor.routing.table import PatternTable, build_table, count, partition_key


class TestPartitionKey:
    def test_simple(self) -> None:
        assert partition_key("/api/users") == ("simple", None)

    def test_root_is_simple(self) -> None:
        assert partition_key("/") == ("simple", None)

    def test_wildcard_in_first_segment(self) -> None:
        assert partition_key("/*/health") == ("complicated", None)

    def test_placeholder_in_first_segment(self) -> None:
        assert partition_key("/{tenant}/users") == ("complicated", None)

    def test_embedded_wildcard_in_first_segment(self) -> None:
        assert partition_key("/v*/users") == ("complicated", None)

    def test_literal_prefix(self) -> None:
        assert partition_key("/api/users/{id}") == ("prefix", "api")

    def test_leading_slashes_ignored(self) -> None:
        assert partition_key("//api//*") == ("prefix", "api")
        assert partition_key("api/*") == ("prefix", "api")


class TestBuildTable:
    def test_empty(self) -> None:
        table = build_table([])
        assert table.simple == frozenset()
        assert table.complicated == frozenset()
        assert len(table.prefix_keyed) == 0
        assert count(table) == 0

    def test_partitions(self) -> None:
        table = build_table(["/api/users", "/api/users/{id}", "/api/*/detail", "/*/health"])
        assert table.simple == frozenset({"/api/users"})
        assert table.complicated == frozenset({"/*/health"})
        assert table.prefix_keyed.get("api") == frozenset({"/api/users/{id}", "/api/*/detail"})

    def test_multiple_prefixes(self) -> None:
        table = build_table(["/api/{id}", "/static/**", "/api/v*/x"])
        assert set(table.prefix_keyed.keys()) == {"api", "static"}
        assert table.prefix_keyed.get("static") == frozenset({"/static/**"})

    def test_duplicates_collapse(self) -> None:
        table = build_table(["/a", "/a", "/a/{id}", "/a/{id}", "/*/x", "/*/x"])
        assert count(table) == 3

    def test_every_pattern_in_exactly_one_bucket(self) -> None:
        patterns = ["/a", "/a/b", "/a/{id}", "/a/*", "/*", "/{x}/y", "/b/**", "/"]
        table = build_table(patterns)
        buckets = [table.simple, table.complicated, frozenset(table.prefix_keyed.values())]
        for pattern in patterns:
            assert sum(pattern in bucket for bucket in buckets) == 1, pattern
        assert frozenset().union(*buckets) == frozenset(patterns)

    def test_accepts_any_iterable(self) -> None:
        table = build_table(p for p in ("/a", "/b/*"))
        assert count(table) == 2

    def test_rebuild_is_value_equal(self) -> None:
        patterns = ["/a", "/a/{id}", "/*/x"]
        assert build_table(patterns) == build_table(list(reversed(patterns)))

    def test_table_is_frozen(self) -> None:
        table = build_table(["/a"])
        with pytest.raises(AttributeError):
            table.simple = frozenset()  # type: ignore[misc]

    def test_buckets_are_read_only(self) -> None:
        table = build_table(["/a", "/a/{id}"])
        assert isinstance(table.simple, frozenset)
        assert isinstance(table.prefix_keyed.get("a"), frozenset)


class TestPatternTable:
    def test_default_is_empty(self) -> None:
        table = PatternTable()
        assert len(table) == 0
        assert list(table) == []
        assert table.prefix_keyed == FrozenSetMultimap()

    def test_len_matches_count(self) -> None:
        table = build_table(["/a", "/b/{id}", "/b/*", "/*/c"])
        assert len(table) == count(table) == 4

    def test_count_uses_values_not_keys(self) -> None:
        table = build_table(["/b/{id}", "/b/*", "/b/{id}/c"])
        assert len(table.prefix_keyed) == 1
        assert count(table) == 3

    def test_iter_yields_every_pattern(self) -> None:
        patterns = {"/a", "/b/{id}", "/*/c"}
        assert set(build_table(patterns)) == patterns

    def test_contains(self) -> None:
        table = build_table(["/a", "/b/{id}", "/*/c"])
        assert "/a" in table
        assert "/b/{id}" in table
        assert "/*/c" in table
        assert "/b/*" not in table
        assert 42 not in table
