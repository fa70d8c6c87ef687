"""Process-wide configuration for underbelt."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Literal, Self, get_args

from underbelt.kernel.errors import InvalidOperation

SchedulerKind = Literal["thread", "asyncio"]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BeltConfig:
    """Defaults consulted when an operation is not given explicit options.

    Attributes:
        thread_safe: Guard once/memoize state with a lock
        scheduler: Timer facility used by delay when no scheduler is passed
        shuffle_seed: Seed for shuffle when no rng is passed; None means random
    """

    thread_safe: bool = True
    scheduler: SchedulerKind = "thread"
    shuffle_seed: int | None = None

    def __post_init__(self) -> None:
        if self.scheduler not in get_args(SchedulerKind):
            raise InvalidOperation(f"Unknown scheduler: {self.scheduler!r}", self.scheduler)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build a config from UNDERBELT_* environment variables."""
        environ = os.environ if environ is None else environ
        changes: dict[str, Any] = {}

        raw = environ.get("UNDERBELT_THREAD_SAFE")
        if raw is not None:
            flag = raw.strip().lower()
            if flag in _TRUE:
                changes["thread_safe"] = True
            elif flag in _FALSE:
                changes["thread_safe"] = False
            else:
                raise InvalidOperation(f"UNDERBELT_THREAD_SAFE is not a boolean: {raw!r}", raw)

        raw = environ.get("UNDERBELT_SCHEDULER")
        if raw is not None:
            changes["scheduler"] = raw.strip().lower()

        raw = environ.get("UNDERBELT_SHUFFLE_SEED")
        if raw is not None and raw.strip():
            try:
                changes["shuffle_seed"] = int(raw)
            except ValueError as exc:
                raise InvalidOperation(f"UNDERBELT_SHUFFLE_SEED is not an integer: {raw!r}", raw) from exc

        return cls(**changes)


_config: BeltConfig | None = None


def get_config() -> BeltConfig:
    """Return the active config, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = BeltConfig.from_env()
    return _config


def configure(**changes: Any) -> BeltConfig:
    """Replace fields of the active config and return the new config."""
    global _config
    _config = replace(get_config(), **changes)
    return _config


def reset_config() -> None:
    """Drop the active config; the next get_config() reloads from the environment."""
    global _config
    _config = None
