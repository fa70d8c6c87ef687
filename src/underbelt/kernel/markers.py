"""The absent marker - a placeholder for "no element at this position"."""

from __future__ import annotations

from typing import Final


class _Absent:
    """Singleton type of ABSENT.

    Falsy, distinct from None and from every data value.
    """

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


def is_absent(value: object) -> bool:
    return value is ABSENT
