"""Wrapper and request types owned by the function combinators."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Hashable, Mapping
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from underbelt.kernel.errors import TypeMismatch
from underbelt.kernel.ports import TimerHandle

R = TypeVar("R")

logger = logging.getLogger(__name__)


def _make_lock(thread_safe: bool) -> AbstractContextManager[Any]:
    return threading.RLock() if thread_safe else nullcontext()


def describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


class Once(Generic[R]):
    """Callable that runs fn on its first call only.

    Later calls return the first result whatever their arguments.
    A first call that raises leaves the latch open.
    """

    def __init__(self, fn: Callable[..., R], *, thread_safe: bool = True) -> None:
        functools.update_wrapper(self, fn, updated=())
        self._fn = fn
        self._called = False
        self._result: R | None = None
        self._lock = _make_lock(thread_safe)

    @property
    def called(self) -> bool:
        return self._called

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        with self._lock:
            if not self._called:
                self._result = self._fn(*args, **kwargs)
                self._called = True
            return self._result  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Once({describe(self._fn)}, called={self._called})"


def _encode(value: Any) -> Hashable:
    """Type-tagged hashable encoding of a single argument."""
    if isinstance(value, (list, tuple)):
        return (type(value), tuple(_encode(item) for item in value))
    if isinstance(value, Mapping):
        return (type(value), frozenset((_encode(k), _encode(v)) for k, v in value.items()))
    if isinstance(value, (set, frozenset)):
        return (type(value), frozenset(_encode(item) for item in value))
    try:
        hash(value)
    except TypeError:
        raise TypeMismatch(f"Cannot memoize on unhashable {type(value).__name__}", value) from None
    return (type(value), value)


def make_key(args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Hashable:
    """Canonical cache key for a call; distinct argument lists give distinct keys."""
    return (
        tuple(_encode(arg) for arg in args),
        frozenset((name, _encode(value)) for name, value in kwargs.items()),
    )


class Memoized(Generic[R]):
    """Callable caching fn's results by argument list.

    The cache is private to the wrapper; only its size can be read.
    Each key has its own lock, so concurrent callers never compute the
    same key twice while distinct keys run in parallel.
    """

    def __init__(self, fn: Callable[..., R], *, thread_safe: bool = True) -> None:
        functools.update_wrapper(self, fn, updated=())
        self._fn = fn
        self._cache: dict[Hashable, R] = {}
        self._thread_safe = thread_safe
        self._lock = _make_lock(thread_safe)
        self._key_locks: dict[Hashable, AbstractContextManager[Any]] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            logger.debug("Clearing %d cached results of %s", len(self._cache), describe(self._fn))
            self._cache.clear()

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        key = make_key(args, kwargs)
        with self._lock:
            if key in self._cache:
                return self._cache[key]
            key_lock = self._key_locks.get(key)
            if key_lock is None:
                key_lock = self._key_locks[key] = _make_lock(self._thread_safe)

        with key_lock:
            with self._lock:
                if key in self._cache:
                    return self._cache[key]
            result = self._fn(*args, **kwargs)
            with self._lock:
                self._cache[key] = result
                self._key_locks.pop(key, None)
            return result

    def __repr__(self) -> str:
        return f"Memoized({describe(self._fn)}, cache_size={self.cache_size})"


class DelayRequest(BaseModel):
    """A deferred call submitted to a scheduler.

    Attributes:
        fn: Callable to run
        wait_ms: Minimum delay in milliseconds
        args: Positional arguments for fn
        kwargs: Keyword arguments for fn
    """

    model_config = ConfigDict(frozen=True)

    fn: Callable[..., Any]
    wait_ms: float = Field(ge=0, allow_inf_nan=False)
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = Field(default_factory=dict)

    @property
    def seconds(self) -> float:
        return self.wait_ms / 1000

    def run(self) -> Any:
        logger.debug("Running delayed call to %s", describe(self.fn))
        return self.fn(*self.args, **self.kwargs)


@dataclass(frozen=True)
class ScheduledCall:
    """Handle for a submitted DelayRequest.

    Attributes:
        request: The request as submitted
        handle: The scheduler's own timer handle
    """

    request: DelayRequest
    handle: TimerHandle

    def cancel(self) -> None:
        """Ask the scheduler not to run the call; no effect once it has run."""
        self.handle.cancel()
