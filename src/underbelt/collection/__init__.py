"""Collection helpers - selection, iteration, set-shaping and ordering."""

from .iteration import contains, each, every, filter_, invoke, map_, pluck, reduce_, reject, some
from .ordering import shuffle, sort_by
from .selection import first, index_of, last
from .sets import difference, flatten, intersection, uniq, zip_

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
    # Ordering
    "sort_by",
    "shuffle",
]
