"""Shallow-copy composition of key/value mappings."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from underbelt.kernel.errors import TypeMismatch
from underbelt.kernel.markers import ABSENT, is_absent

M = TypeVar("M", bound=MutableMapping[Any, Any])


def _check(target: Any, sources: tuple[Any, ...]) -> None:
    if not isinstance(target, MutableMapping):
        raise TypeMismatch(f"Cannot merge into {type(target).__name__}", target)
    for source in sources:
        if not isinstance(source, Mapping):
            raise TypeMismatch(f"Cannot merge from {type(source).__name__}", source)


def extend(target: M, *sources: Mapping[Any, Any]) -> M:
    """Copy every key of every source into target; later sources win."""
    _check(target, sources)
    for source in sources:
        target.update(source)
    return target


def defaults(target: M, *sources: Mapping[Any, Any]) -> M:
    """Fill keys of target that are missing, None or ABSENT; the first source wins."""
    _check(target, sources)
    for source in sources:
        for key, value in source.items():
            current = target.get(key, ABSENT)
            if current is None or is_absent(current):
                target[key] = value
    return target
