"""Scheduler implementations for delayed calls."""

from __future__ import annotations

import asyncio
import logging
import threading

from underbelt.combinators.types import DelayRequest, ScheduledCall, describe
from underbelt.kernel.config import get_config
from underbelt.kernel.errors import InvalidOperation
from underbelt.kernel.ports import SchedulerPort, TimerHandle

logger = logging.getLogger(__name__)


class ThreadingScheduler:
    """Runs each request on its own threading.Timer."""

    def __init__(self, daemon: bool = True) -> None:
        self.daemon = daemon

    def schedule(self, request: DelayRequest) -> ScheduledCall:
        timer = threading.Timer(request.seconds, request.run)
        timer.daemon = self.daemon
        timer.start()
        logger.debug("Scheduled %s in %.1f ms on a timer thread", describe(request.fn), request.wait_ms)
        return ScheduledCall(request=request, handle=timer)


class _ThreadsafeTimer:
    """Timer handle for a call_later issued from outside the loop's thread.

    The real TimerHandle is created on the loop thread; a cancel that
    arrives first stops it from being created at all.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._lock = threading.Lock()
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False

    def start(self, request: DelayRequest) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._handle = self._loop.call_later(request.seconds, request.run)

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            handle = self._handle
        if handle is not None:
            self._loop.call_soon_threadsafe(handle.cancel)


class AsyncioScheduler:
    """Runs requests on an asyncio event loop via call_later.

    Without an explicit loop, the loop running at schedule time is used.
    An explicit loop may be running on another thread.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, request: DelayRequest) -> ScheduledCall:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        loop = self._loop if self._loop is not None else running
        if loop is None:
            raise InvalidOperation("AsyncioScheduler needs a running event loop", request)

        handle: TimerHandle
        if loop is running:
            handle = loop.call_later(request.seconds, request.run)
        else:
            # call_later does not wake a loop blocked on another thread
            timer = _ThreadsafeTimer(loop)
            loop.call_soon_threadsafe(timer.start, request)
            handle = timer
        logger.debug("Scheduled %s in %.1f ms on the event loop", describe(request.fn), request.wait_ms)
        return ScheduledCall(request=request, handle=handle)


def default_scheduler() -> SchedulerPort:
    """Scheduler named by the active BeltConfig."""
    if get_config().scheduler == "asyncio":
        return AsyncioScheduler()
    return ThreadingScheduler()
