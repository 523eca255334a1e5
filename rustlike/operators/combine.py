"""
Combining operators - Chain, Zip, Cycle
"""

from collections.abc import Iterable, Iterator
from typing import Any, List, Tuple

from rustlike.operators.base import Operator, explain_source


class Chain(Operator):
    """
    Chain operator - yields every source in turn, left to right

    Each source is drained completely before the next one is touched.
    """

    def __init__(self, *sources: Iterable[Any]):
        """
        Initialize chain operator

        Args:
            *sources: Iterables to concatenate
        """
        super().__init__(sources[0] if sources else None)
        self.sources = sources

    def __iter__(self) -> Iterator[Any]:
        for source in self.sources:
            yield from source

    def explain(self, indent: int = 0) -> List[str]:
        lines = [" " * indent + repr(self)]
        for source in self.sources:
            lines.extend(explain_source(source, indent + 2))
        return lines

    def __repr__(self) -> str:
        return f"Chain({len(self.sources)} sources)"


class Zip(Operator):
    """
    Zip operator - pairs up values from two sources

    Yields (left, right) tuples until either side runs out; a trailing
    unpaired value is never yielded. The right side is only pulled once
    the left side has produced a value.
    """

    def __init__(self, left: Iterable[Any], right: Iterable[Any]):
        """
        Initialize zip operator

        Args:
            left: Source of the first tuple element
            right: Source of the second tuple element
        """
        super().__init__(left)
        self.left = left
        self.right = right

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        yield from zip(self.left, self.right)

    def explain(self, indent: int = 0) -> List[str]:
        lines = [" " * indent + repr(self)]
        lines.extend(explain_source(self.left, indent + 2))
        lines.extend(explain_source(self.right, indent + 2))
        return lines

    def __repr__(self) -> str:
        return "Zip()"


class Cycle(Operator):
    """
    Cycle operator - repeats the child's values forever

    Values are yielded as they are first pulled and remembered at the
    same time. Once the child is exhausted the remembered values are
    replayed in a loop that never ends, so anything consuming a Cycle
    needs a Take, TakeWhile or find() further down the chain.

    Note: Every upstream value is kept in memory.
    An empty child has nothing to replay and ends immediately.
    """

    def __init__(self, child: Iterable[Any]):
        super().__init__(child)

    def __iter__(self) -> Iterator[Any]:
        seen = []
        for value in self.child:
            seen.append(value)
            yield value

        if not seen:
            return

        while True:
            yield from seen

    def __repr__(self) -> str:
        return "Cycle()"
