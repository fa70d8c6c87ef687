from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from underbelt.combinators import DelayRequest, ScheduledCall


@dataclass
class CallCounter:
    """Callable that records every call and returns fn's result."""

    fn: Any = None
    calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        if self.fn is None:
            return args[0] if args else None
        return self.fn(*args, **kwargs)


@dataclass
class FakeHandle:
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Scheduler that holds requests until run_all() is called."""

    pending: list[ScheduledCall] = field(default_factory=list)

    def schedule(self, request: DelayRequest) -> ScheduledCall:
        call = ScheduledCall(request=request, handle=FakeHandle())
        self.pending.append(call)
        return call

    def run_all(self) -> list[Any]:
        due = [c for c in self.pending if not c.handle.cancelled]
        self.pending.clear()
        return [c.request.run() for c in sorted(due, key=lambda c: c.request.wait_ms)]
