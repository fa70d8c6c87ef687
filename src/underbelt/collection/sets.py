"""Structural transforms across one or more sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from underbelt.kernel.equality import identity_key
from underbelt.kernel.markers import ABSENT

T = TypeVar("T")

_NESTED = (list, tuple)


def uniq(seq: Sequence[T]) -> list[T]:
    """Return each distinct element once, in order of first occurrence."""
    seen = set()
    result = []
    for element in seq:
        key = identity_key(element)
        if key not in seen:
            seen.add(key)
            result.append(element)
    return result


def intersection(*seqs: Sequence[T]) -> list[T]:
    """Elements present in every sequence, ordered as in the first one."""
    if not seqs:
        return []
    head, *rest = seqs
    others = [{identity_key(element) for element in seq} for seq in rest]
    seen = set()
    result = []
    for element in head:
        key = identity_key(element)
        if key in seen:
            continue
        seen.add(key)
        if all(key in keys for keys in others):
            result.append(element)
    return result


def difference(seq: Sequence[T], *others: Sequence[Any]) -> list[T]:
    """Elements of seq not present in any of the other sequences."""
    excluded = {identity_key(element) for other in others for element in other}
    return [element for element in seq if identity_key(element) not in excluded]


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily nested lists and tuples depth-first."""
    return list(_walk(nested))


def _walk(nested: Sequence[Any]) -> Iterator[Any]:
    for element in nested:
        if isinstance(element, _NESTED):
            yield from _walk(element)
        else:
            yield element


def zip_(*seqs: Sequence[Any]) -> list[tuple[Any, ...]]:
    """Group elements by position; shorter sequences are padded with ABSENT.

    Example:
        zip_(["a", "b"], [1]) == [("a", 1), ("b", ABSENT)]
    """
    longest = max((len(seq) for seq in seqs), default=0)
    return [
        tuple(seq[i] if i < len(seq) else ABSENT for seq in seqs)
        for i in range(longest)
    ]
