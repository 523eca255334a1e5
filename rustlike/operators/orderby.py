"""
Ordering operators - Sort, Reverse

Both materialize their child completely, and they do it as soon as they
are constructed rather than on the first pull.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from rustlike.core.types import Comparator, lexicographic_compare
from rustlike.operators.base import Operator, callable_name


class Sort(Operator):
    """
    Sort operator - yields values in ascending comparator order

    The child is drained into memory when the operator is created. Sorting
    itself is incremental: each pull scans the remaining values for the
    smallest one, removes it and yields it. Producing the first value of m
    costs m-1 comparisons and no comparator call happens before the first
    pull, so taking only the k smallest values does O(k*m) work instead
    of sorting everything.

    A full drain costs O(m^2) comparisons. Ties keep the first candidate
    the scan met: a later value only takes over when the comparator says
    the current candidate is strictly greater.
    """

    def __init__(self, child: Iterable[Any], comparator: Optional[Comparator] = None):
        """
        Initialize sort operator

        Args:
            child: Iterable to drain and sort
            comparator: Three-way compare returning a negative number, zero or
                a positive number (defaults to lexicographic_compare)
        """
        super().__init__(child)
        self.comparator = comparator or lexicographic_compare
        self.remaining = list(child)

    def __iter__(self) -> Iterator[Any]:
        compare = self.comparator
        remaining = self.remaining
        while remaining:
            smallest = 0
            for index in range(1, len(remaining)):
                if compare(remaining[smallest], remaining[index]) > 0:
                    smallest = index
            yield remaining.pop(smallest)

    def explain(self, indent: int = 0):
        return [" " * indent + repr(self), " " * (indent + 2) + f"Materialized({len(self.remaining)})"]

    def __repr__(self) -> str:
        return f"Sort({callable_name(self.comparator)})"


class Reverse(Operator):
    """
    Reverse operator - yields the child's values from last to first

    The child is drained into memory when the operator is created; values
    are read back from the tail without reordering the stored list.
    """

    def __init__(self, child: Iterable[Any]):
        super().__init__(child)
        self.values = list(child)

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self.values) - 1, -1, -1):
            yield self.values[index]

    def explain(self, indent: int = 0):
        return [" " * indent + repr(self), " " * (indent + 2) + f"Materialized({len(self.values)})"]

    def __repr__(self) -> str:
        return "Reverse()"
