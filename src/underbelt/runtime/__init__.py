"""Runtime layer - timer facilities used by delay."""

from underbelt.runtime.scheduler import AsyncioScheduler, ThreadingScheduler, default_scheduler

__all__ = [
    "ThreadingScheduler",
    "AsyncioScheduler",
    "default_scheduler",
]
