"""Traversal and transformation primitives over sequences and mappings."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from underbelt.kernel.equality import strict_equal
from underbelt.kernel.errors import InvalidOperation, TypeMismatch
from underbelt.kernel.markers import ABSENT

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")

Predicate = Callable[[Any], Any]


def _values(collection: Sequence[T] | Mapping[Any, T]) -> Iterable[T]:
    if isinstance(collection, Mapping):
        return collection.values()
    return collection


def each(
    collection: Sequence[T] | Mapping[Any, T],
    fn: Callable[[T, Any, Any], Any],
) -> None:
    """Call fn(value, key, collection) for every element.

    For sequences the key is the index, for mappings the field name.
    """
    if isinstance(collection, Mapping):
        for key, value in collection.items():
            fn(value, key, collection)
        return
    for index, value in enumerate(collection):
        fn(value, index, collection)


def map_(seq: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    return [fn(element) for element in seq]


def filter_(seq: Iterable[T], predicate: Predicate) -> list[T]:
    return [element for element in seq if predicate(element)]


def reject(seq: Iterable[T], predicate: Predicate) -> list[T]:
    return [element for element in seq if not predicate(element)]


def every(seq: Iterable[Any], predicate: Predicate | None = None) -> bool:
    """True if predicate holds for all elements.

    A missing predicate always holds, so the result is True.
    """
    if predicate is None:
        return True
    return all(predicate(element) for element in seq)


def some(seq: Iterable[Any], predicate: Predicate | None = None) -> bool:
    """True if predicate holds for at least one element.

    A missing predicate tests the element's own truthiness.
    """
    if predicate is None:
        return any(seq)
    return any(predicate(element) for element in seq)


def contains(collection: Sequence[Any] | Mapping[Any, Any], target: Any) -> bool:
    """True if some element (or mapping value) is strictly equal to target."""
    return any(strict_equal(value, target) for value in _values(collection))


def reduce_(
    collection: Sequence[T] | Mapping[Any, T],
    fn: Callable[[A, T], A],
    initial: A | Any = ABSENT,
) -> A:
    """Fold the collection left to right with fn(accumulator, element).

    Args:
        collection: Sequence, or mapping whose values are folded
        fn: Step function
        initial: Starting accumulator; when omitted the first element is
            used and folding starts from the second

    Returns:
        The final accumulator

    Raises:
        InvalidOperation: If the collection is empty and no initial is given
    """
    iterator = iter(_values(collection))
    accumulator = initial
    if accumulator is ABSENT:
        try:
            accumulator = next(iterator)
        except StopIteration:
            raise InvalidOperation("reduce of empty collection with no initial value", collection) from None
    for element in iterator:
        accumulator = fn(accumulator, element)
    return accumulator


def pluck(seq: Iterable[Any], key: str) -> list[Any]:
    """Map every element to its key field.

    Mappings are read by key (ABSENT if missing), other objects by attribute.
    """
    plucked = []
    for element in seq:
        if isinstance(element, Mapping):
            plucked.append(element.get(key, ABSENT))
        elif hasattr(element, key):
            plucked.append(getattr(element, key))
        else:
            raise TypeMismatch(
                f"Cannot pluck {key!r} from {type(element).__name__}", element
            )
    return plucked


def invoke(seq: Iterable[Any], method_name: str, *args: Any, **kwargs: Any) -> list[Any]:
    """Call the method named method_name on every element, collecting results."""
    results = []
    for element in seq:
        method = getattr(element, method_name, None)
        if not callable(method):
            raise TypeMismatch(
                f"{type(element).__name__} has no method {method_name!r}", element
            )
        results.append(method(*args, **kwargs))
    return results
