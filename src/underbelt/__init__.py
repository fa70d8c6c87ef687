from .collection import (
    contains,
    difference,
    each,
    every,
    filter_,
    first,
    flatten,
    index_of,
    intersection,
    invoke,
    last,
    map_,
    pluck,
    reduce_,
    reject,
    shuffle,
    some,
    sort_by,
    uniq,
    zip_,
)
from .combinators import DelayRequest, Memoized, Once, ScheduledCall, delay, memoize, once
from .kernel import (
    ABSENT,
    BeltConfig,
    InvalidOperation,
    TypeMismatch,
    UnderbeltError,
    configure,
    get_config,
    reset_config,
)
from .objects import defaults, extend
from .runtime import AsyncioScheduler, ThreadingScheduler

__all__ = [
    # Selection
    "first",
    "last",
    "index_of",
    # Iteration
    "each",
    "map_",
    "filter_",
    "reject",
    "reduce_",
    "every",
    "some",
    "contains",
    "pluck",
    "invoke",
    # Set-shaping
    "uniq",
    "intersection",
    "difference",
    "flatten",
    "zip_",
    # Object merging
    "extend",
    "defaults",
    # Function combinators
    "once",
    "memoize",
    "delay",
    "Once",
    "Memoized",
    "DelayRequest",
    "ScheduledCall",
    "ThreadingScheduler",
    "AsyncioScheduler",
    # Ordering
    "sort_by",
    "shuffle",
    # Kernel
    "ABSENT",
    "UnderbeltError",
    "InvalidOperation",
    "TypeMismatch",
    "BeltConfig",
    "get_config",
    "configure",
    "reset_config",
]
