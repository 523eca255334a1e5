"""Iteration protocol types for rustlike.

This module defines the explicit pull result used by LazyIterator.next()
and the comparator contract shared by the ordering operators.
"""

from typing import Any, Callable, NamedTuple


class Step(NamedTuple):
    """Result of a single pull from an iterator.

    ``done`` is True once the source has nothing more to give; ``value``
    is then None. Otherwise ``value`` holds the pulled value.
    """

    done: bool
    value: Any = None

    @classmethod
    def finished(cls) -> "Step":
        """Step reported by an exhausted source."""
        return cls(True, None)

    @classmethod
    def of(cls, value: Any) -> "Step":
        """Step carrying a pulled value."""
        return cls(False, value)


Comparator = Callable[[Any, Any], int]


def lexicographic_compare(a: Any, b: Any) -> int:
    """Three-way compare using the values' own ordering.

    Returns 1 if a > b, -1 if a < b and 0 otherwise. Strings compare by
    code point, numbers numerically.
    """
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


class _Missing:
    """Marker for an argument that was not passed at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
