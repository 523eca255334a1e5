"""
Element-wise operators - Map, Filter, Inspect, Enumerate, Scan

Each of these pulls one upstream value per step and holds no buffer.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable, List, Tuple

from rustlike.operators.base import Operator, callable_name


class Map(Operator):
    """
    Map operator - yields f(x) for every upstream x

    f is only called as values are pulled through.
    """

    def __init__(self, child: Iterable[Any], functor: Callable[[Any], Any]):
        """
        Initialize map operator

        Args:
            child: Iterable to pull values from
            functor: Function applied to each value
        """
        super().__init__(child)
        self.functor = functor

    def __iter__(self) -> Iterator[Any]:
        functor = self.functor
        for value in self.child:
            yield functor(value)

    def __repr__(self) -> str:
        return f"Map({callable_name(self.functor)})"


class Filter(Operator):
    """
    Filter operator - yields only values matching a predicate

    Non-matching values are pulled and dropped until a match arrives
    or the child is exhausted.
    """

    def __init__(self, child: Iterable[Any], predicate: Callable[[Any], Any]):
        """
        Initialize filter operator

        Args:
            child: Iterable to pull values from
            predicate: Values are kept when this returns a truthy result
        """
        super().__init__(child)
        self.predicate = predicate

    def __iter__(self) -> Iterator[Any]:
        predicate = self.predicate
        for value in self.child:
            if predicate(value):
                yield value

    def __repr__(self) -> str:
        return f"Filter({callable_name(self.predicate)})"


class Inspect(Operator):
    """Calls a side-effect function with each value, then yields it unchanged"""

    def __init__(self, child: Iterable[Any], functor: Callable[[Any], Any]):
        super().__init__(child)
        self.functor = functor

    def __iter__(self) -> Iterator[Any]:
        for value in self.child:
            self.functor(value)
            yield value

    def __repr__(self) -> str:
        return f"Inspect({callable_name(self.functor)})"


class Enumerate(Operator):
    """Yields (index, value) tuples, counting from start"""

    def __init__(self, child: Iterable[Any], start: int = 0):
        super().__init__(child)
        self.start = start

    def __iter__(self) -> Iterator[Tuple[int, Any]]:
        index = self.start
        for value in self.child:
            yield (index, value)
            index += 1

    def __repr__(self) -> str:
        return f"Enumerate(start={self.start})"


class Scan(Operator):
    """
    Scan operator - stateful map with a shared accumulator cell

    The accumulator lives in a one-element list seeded with ``initial``.
    For each upstream value the functor is called as ``functor(cell, value)``
    and its return value is yielded. The functor may read ``cell[0]`` and
    replace it to carry state into the next step; what it yields does not
    have to be the accumulator.

    Example:
        Running totals:

        >>> def running(cell, x):
        ...     cell[0] += x
        ...     return cell[0]
        >>> list(Scan([1, 2, 3], running, 0))
        [1, 3, 6]
    """

    def __init__(
        self,
        child: Iterable[Any],
        functor: Callable[[List[Any], Any], Any],
        initial: Any,
    ):
        """
        Initialize scan operator

        Args:
            child: Iterable to pull values from
            functor: Called with (accumulator cell, value) for each value
            initial: Starting value of the accumulator
        """
        super().__init__(child)
        self.functor = functor
        self.initial = initial

    def __iter__(self) -> Iterator[Any]:
        cell = [self.initial]
        for value in self.child:
            yield self.functor(cell, value)

    def __repr__(self) -> str:
        return f"Scan({callable_name(self.functor)}, initial={self.initial!r})"
