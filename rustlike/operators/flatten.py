"""
Flattening operators - Flat, FlatMap

Only iterable values are flattened. Text is iterable by character but
is treated as a single value, as are bytes.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable

from rustlike.operators.base import Operator, callable_name
from rustlike.operators.transform import Map

ATOMIC_TYPES = (str, bytes, bytearray)


def is_flattenable(value: Any) -> bool:
    """Check whether a value should be expanded by Flat"""
    return isinstance(value, Iterable) and not isinstance(value, ATOMIC_TYPES)


class Flat(Operator):
    """
    Flat operator - expands nested iterables up to a given depth

    Each iterable value is replaced by its elements, recursively, until
    depth levels have been removed. Non-iterable values and text pass
    through untouched. A depth of 0 yields every value whole.
    """

    def __init__(self, child: Iterable[Any], depth: int = 1):
        """
        Initialize flat operator

        Args:
            child: Iterable to pull values from
            depth: Number of nesting levels to remove
        """
        super().__init__(child)
        self.depth = depth

    def __iter__(self) -> Iterator[Any]:
        for value in self.child:
            if self.depth > 0 and is_flattenable(value):
                if self.depth > 1:
                    yield from Flat(value, self.depth - 1)
                else:
                    yield from value
            else:
                yield value

    def __repr__(self) -> str:
        return f"Flat(depth={self.depth})"


class FlatMap(Flat):
    """Maps each value through a functor, then flattens one level"""

    def __init__(self, child: Iterable[Any], functor: Callable[[Any], Any]):
        super().__init__(Map(child, functor), depth=1)
        self.functor = functor

    def __repr__(self) -> str:
        return f"FlatMap({callable_name(self.functor)})"
