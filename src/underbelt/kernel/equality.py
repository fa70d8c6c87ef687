"""Strict equality shared by selection, iteration and set-shaping.

Primitives compare by value, everything else by reference.
Booleans are never equal to numbers.
"""

from __future__ import annotations

from collections.abc import Hashable
from numbers import Number
from typing import Any

_VALUE_TYPES = (str, bytes)


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (bool, Number, *_VALUE_TYPES))


def strict_equal(a: Any, b: Any) -> bool:
    """Return True if a and b are strictly equal."""
    if a is b:
        return True
    if not (is_primitive(a) and is_primitive(b)):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, Number) and isinstance(b, Number):
        return a == b
    return type(a) is type(b) and a == b


def identity_key(value: Any) -> Hashable:
    """Hashable key such that equal keys mean strictly equal values."""
    if value is None:
        return ("none",)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, Number):
        return ("number", value)
    if isinstance(value, _VALUE_TYPES):
        return (type(value).__name__, value)
    return ("ref", id(value))
