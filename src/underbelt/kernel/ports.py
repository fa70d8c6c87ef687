"""Port protocols for underbelt - pure abstractions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from underbelt.combinators.types import DelayRequest, ScheduledCall


class TimerHandle(Protocol):
    """Handle returned by a timer facility."""

    def cancel(self) -> None: ...


class SchedulerPort(Protocol):
    """Deferred execution port.

    The scheduler owns the timer facility; callers only submit requests.
    """

    def schedule(self, request: DelayRequest) -> ScheduledCall:
        """Run request once, no earlier than request.wait_ms from now."""
        ...
