"""Function combinators: once, memoize, delay."""

# Combinators satisfy the following laws:
#
# 1. once(f)(*a) == once(f)(*b) for any a, b after the first call
# 2. memoize(f)(*a) calls f at most once per distinct argument list
# 3. delay(f, ms) never calls f on the caller's stack


from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from underbelt.kernel.config import get_config
from underbelt.kernel.errors import InvalidOperation
from underbelt.kernel.ports import SchedulerPort
from underbelt.runtime.scheduler import default_scheduler

from .types import DelayRequest, Memoized, Once, ScheduledCall

R = TypeVar("R")


def once(fn: Callable[..., R], *, thread_safe: bool | None = None) -> Once[R]:
    """Wrap fn so it runs at most once.

    Args:
        fn: The function to wrap
        thread_safe: Guard the latch with a lock; defaults to BeltConfig.thread_safe

    Returns:
        Once wrapper returning the first call's result on every call
    """
    if thread_safe is None:
        thread_safe = get_config().thread_safe
    return Once(fn, thread_safe=thread_safe)


def memoize(fn: Callable[..., R], *, thread_safe: bool | None = None) -> Memoized[R]:
    """Wrap fn so repeated calls with equal arguments reuse the cached result.

    Arguments are encoded with their types, so 1, 1.0, True and "1"
    are cached separately. Lists, tuples, dicts and sets are encoded
    by content.

    Raises:
        TypeMismatch: When called with an argument that cannot be encoded
    """
    if thread_safe is None:
        thread_safe = get_config().thread_safe
    return Memoized(fn, thread_safe=thread_safe)


def delay(
    fn: Callable[..., Any],
    wait_ms: float,
    *args: Any,
    scheduler: SchedulerPort | None = None,
    **kwargs: Any,
) -> ScheduledCall:
    """Schedule fn(*args, **kwargs) to run once after wait_ms milliseconds.

    Returns immediately. The call runs on the scheduler's own thread or
    event loop turn, never before wait_ms has elapsed.

    Args:
        fn: The function to call later
        wait_ms: Delay in milliseconds, must be finite and >= 0
        *args: Positional arguments for fn
        scheduler: Timer facility; defaults to the one named by BeltConfig.scheduler
        **kwargs: Keyword arguments for fn

    Returns:
        ScheduledCall handle

    Raises:
        InvalidOperation: If fn is not callable or wait_ms is invalid
    """
    try:
        request = DelayRequest(fn=fn, wait_ms=wait_ms, args=args, kwargs=kwargs)
    except ValidationError as exc:
        raise InvalidOperation(f"Invalid delay request: {exc}", wait_ms) from exc

    if scheduler is None:
        scheduler = default_scheduler()
    return scheduler.schedule(request)
