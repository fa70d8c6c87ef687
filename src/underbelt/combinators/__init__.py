"""Combinators - wrap a function to change how it is invoked."""

from .ops import delay, memoize, once
from .types import DelayRequest, Memoized, Once, ScheduledCall, make_key

__all__ = [
    "once",
    "memoize",
    "delay",
    "Once",
    "Memoized",
    "DelayRequest",
    "ScheduledCall",
    "make_key",
]
