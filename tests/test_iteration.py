from __future__ import annotations

from dataclasses import dataclass

import pytest

from underbelt import (
    ABSENT,
    InvalidOperation,
    TypeMismatch,
    contains,
    each,
    every,
    filter_,
    flatten,
    invoke,
    map_,
    pluck,
    reduce_,
    reject,
    some,
)
from fakes import CallCounter


@dataclass
class Person:
    name: str
    age: int


class TestEach:
    def test_each_over_sequence_passes_index(self) -> None:
        seen = []
        seq = ["a", "b"]
        result = each(seq, lambda value, key, coll: seen.append((value, key, coll)))
        assert result is None
        assert seen == [("a", 0, seq), ("b", 1, seq)]

    def test_each_over_mapping_passes_field_name(self) -> None:
        seen = []
        mapping = {"x": 1, "y": 2}
        each(mapping, lambda value, key, coll: seen.append((key, value)))
        assert seen == [("x", 1), ("y", 2)]

    def test_each_over_empty_never_calls(self) -> None:
        counter = CallCounter()
        each([], counter)
        each({}, counter)
        assert counter.count == 0


def test_map_keeps_length_and_order() -> None:
    assert map_([1, 2, 3], lambda x: x * 10) == [10, 20, 30]
    assert map_([], lambda x: x) == []


def test_filter_and_reject_partition_in_order() -> None:
    seq = [1, 2, 3, 4, 5, 6]
    is_even = lambda x: x % 2 == 0  # noqa: E731
    assert filter_(seq, is_even) == [2, 4, 6]
    assert reject(seq, is_even) == [1, 3, 5]


def test_map_then_flatten_round_trips() -> None:
    seq = [3, "a", None, 2.5]
    assert flatten(map_(seq, lambda x: [x])) == seq


class TestEveryAndSome:
    def test_every(self) -> None:
        assert every([2, 4], lambda x: x % 2 == 0)
        assert not every([2, 3], lambda x: x % 2 == 0)

    def test_every_without_predicate_is_true(self) -> None:
        assert every([0, None, False])
        assert every([])

    def test_some(self) -> None:
        assert some([1, 3, 4], lambda x: x % 2 == 0)
        assert not some([1, 3], lambda x: x % 2 == 0)

    def test_some_without_predicate_tests_truthiness(self) -> None:
        assert some([0, None, "x"])
        assert not some([0, None, False, ""])

    def test_empty_input_boundaries(self) -> None:
        always = lambda _: True  # noqa: E731
        never = lambda _: False  # noqa: E731
        assert every([], never)
        assert not some([], always)
        assert not some([])

    def test_every_stops_at_first_failure(self) -> None:
        counter = CallCounter(lambda x: x < 2)
        every([1, 2, 3, 4], counter)
        assert counter.count == 2


class TestContains:
    def test_sequence(self) -> None:
        assert contains([1, 2, 3], 2)
        assert not contains([1, 2, 3], "2")

    def test_mapping_checks_values(self) -> None:
        assert contains({"a": 1, "b": 2}, 2)
        assert not contains({"a": 1}, "a")

    def test_compound_values_by_reference(self) -> None:
        item = {"k": 1}
        assert contains([item], item)
        assert not contains([{"k": 1}], {"k": 1})


class TestReduce:
    def test_with_initial(self) -> None:
        assert reduce_([1, 2, 3], lambda acc, x: acc + x, 10) == 16

    def test_without_initial_seeds_from_first_element(self) -> None:
        counter = CallCounter(lambda acc, x: acc * x)
        assert reduce_([2, 3, 4], counter) == 24
        assert counter.calls[0][0] == (2, 3)
        assert counter.count == 2

    def test_single_element_without_initial(self) -> None:
        counter = CallCounter(lambda acc, x: acc + x)
        assert reduce_(["only"], counter) == "only"
        assert counter.count == 0

    def test_empty_with_initial_returns_initial(self) -> None:
        assert reduce_([], lambda acc, x: acc + x, 7) == 7

    def test_empty_without_initial_raises(self) -> None:
        with pytest.raises(InvalidOperation) as excinfo:
            reduce_([], lambda acc, x: acc + x)
        assert excinfo.value.value == []

    def test_none_is_a_real_initial_value(self) -> None:
        assert reduce_([1], lambda acc, x: (acc, x), None) == (None, 1)

    def test_mapping_folds_values(self) -> None:
        assert reduce_({"a": 1, "b": 2}, lambda acc, x: acc + x) == 3

    def test_left_to_right_order(self) -> None:
        assert reduce_(["a", "b", "c"], lambda acc, x: acc + x, "") == "abc"


class TestPluck:
    def test_mappings(self) -> None:
        people = [{"name": "moe", "age": 40}, {"name": "curly", "age": 60}]
        assert pluck(people, "age") == [40, 60]

    def test_missing_key_is_absent(self) -> None:
        assert pluck([{"a": 1}, {}], "a") == [1, ABSENT]

    def test_objects_by_attribute(self) -> None:
        assert pluck([Person("moe", 40), Person("larry", 50)], "name") == ["moe", "larry"]

    def test_non_object_raises(self) -> None:
        with pytest.raises(TypeMismatch) as excinfo:
            pluck([{"a": 1}, 5], "a")
        assert excinfo.value.value == 5


class TestInvoke:
    def test_calls_method_on_each(self) -> None:
        assert invoke(["a", "b"], "upper") == ["A", "B"]

    def test_passes_arguments(self) -> None:
        assert invoke(["a-b", "c-d-e"], "split", "-") == [["a", "b"], ["c", "d", "e"]]
        assert invoke(["a b c"], "split", maxsplit=1) == [["a", "b c"]]

    def test_missing_method_raises(self) -> None:
        with pytest.raises(TypeMismatch):
            invoke(["a", 1], "upper")

    def test_non_callable_attribute_raises(self) -> None:
        with pytest.raises(TypeMismatch):
            invoke([Person("moe", 40)], "name")
