"""Positional access into ordered sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from underbelt.kernel.equality import strict_equal
from underbelt.kernel.markers import ABSENT

T = TypeVar("T")


def first(seq: Sequence[T], n: int | None = None) -> T | list[T] | Any:
    """Return the first element, or the leading n elements as a new list.

    Args:
        seq: The sequence to read from
        n: How many leading elements to take, clipped to the sequence length

    Returns:
        The first element (ABSENT when seq is empty) if n is None,
        otherwise a list of at most n elements
    """
    if n is None:
        return seq[0] if len(seq) else ABSENT
    return list(seq[: max(n, 0)])


def last(seq: Sequence[T], n: int | None = None) -> T | list[T] | Any:
    """Return the last element, or the trailing n elements as a new list.

    A count larger than the sequence returns the whole sequence.
    """
    if n is None:
        return seq[-1] if len(seq) else ABSENT
    if n <= 0:
        return []
    return list(seq[max(len(seq) - n, 0):])


def index_of(seq: Sequence[Any], target: Any) -> int:
    """Position of the first element strictly equal to target, or -1."""
    for i, element in enumerate(seq):
        if strict_equal(element, target):
            return i
    return -1
