"""Kernel layer - markers, equality, errors, config and ports."""

from underbelt.kernel.config import BeltConfig, configure, get_config, reset_config
from underbelt.kernel.equality import identity_key, is_primitive, strict_equal
from underbelt.kernel.errors import InvalidOperation, TypeMismatch, UnderbeltError
from underbelt.kernel.markers import ABSENT, is_absent
from underbelt.kernel.ports import SchedulerPort, TimerHandle

__all__ = [
    "ABSENT",
    "is_absent",
    # Equality
    "strict_equal",
    "identity_key",
    "is_primitive",
    # Errors
    "UnderbeltError",
    "InvalidOperation",
    "TypeMismatch",
    # Config
    "BeltConfig",
    "get_config",
    "configure",
    "reset_config",
    # Ports
    "SchedulerPort",
    "TimerHandle",
]
