"""Reordering a sequence by a criterion or at random."""

from __future__ import annotations

import inspect
import random
from collections.abc import Callable, Mapping, Sequence
from functools import cmp_to_key
from typing import Any, TypeVar

from underbelt.kernel.config import get_config
from underbelt.kernel.errors import TypeMismatch

T = TypeVar("T")

Criterion = str | Callable[[Any], Any] | Callable[[Any, Any], int]


def _field(name: str) -> Callable[[Any], Any]:
    def key(element: Any) -> Any:
        if isinstance(element, Mapping):
            if name not in element:
                raise TypeMismatch(f"Element has no field {name!r}", element)
            return element[name]
        if not hasattr(element, name):
            raise TypeMismatch(f"{type(element).__name__} has no field {name!r}", element)
        return getattr(element, name)

    return key


def _positional_arity(fn: Callable[..., Any]) -> int | None:
    """Number of required positional parameters, None if unknown."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def _is_comparator(criterion: Criterion) -> bool:
    return callable(criterion) and not isinstance(criterion, str) and _positional_arity(criterion) == 2


def _sort_key(criterion: Criterion) -> Callable[[Any], Any]:
    if isinstance(criterion, str):
        return _field(criterion)
    if not callable(criterion):
        raise TypeMismatch(f"Criterion must be a field name or callable, got {type(criterion).__name__}", criterion)
    return criterion  # type: ignore[return-value]


def sort_by(seq: Sequence[T], criterion: Criterion) -> list[T]:
    """Stable ascending sort of seq into a new list.

    Args:
        seq: Sequence to sort; it is not modified
        criterion: Field name, one-argument key function, or
            two-argument comparator returning <0, 0 or >0

    Returns:
        A new sorted list; equal elements keep their input order

    Raises:
        TypeMismatch: If a field is missing or keys cannot be compared.
            Errors raised by a key function or comparator propagate as-is.
    """
    items = list(seq)
    if _is_comparator(criterion):
        return sorted(items, key=cmp_to_key(criterion))  # type: ignore[arg-type]

    key = _sort_key(criterion)
    keys = [key(item) for item in items]
    try:
        order = sorted(range(len(items)), key=keys.__getitem__)
    except TypeError as exc:
        raise TypeMismatch(f"Cannot order elements: {exc}", seq) from exc
    return [items[i] for i in order]


def shuffle(seq: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly random permutation of seq (Fisher-Yates).

    The input is not modified.
    """
    if rng is None:
        rng = random.Random(get_config().shuffle_seed)
    shuffled = list(seq)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
