"""Object merging helpers."""

from .merge import defaults, extend

__all__ = ["extend", "defaults"]
