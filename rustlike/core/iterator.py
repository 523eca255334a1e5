"""
Main Iterator API - user-facing interface for rustlike

LazyIterator wraps any iterable and exposes the pipeline operators as
chainable methods, plus eager consumers that drain it.

Example:
    >>> from rustlike import LazyIterator
    >>> LazyIterator([3, 1, 4, 1, 5]).filter(lambda x: x > 1).map(str).collect()
    ['3', '4', '5']

A LazyIterator owns its upstream iterator exclusively: chaining hands the
upstream over to the new stage, and consuming the wrapper consumes the
source. Two consumers pulling from the same LazyIterator see interleaved
values.
"""

import math
import operator
from collections.abc import Iterable, Iterator
from typing import Any, Callable, List, Optional

from rustlike.core.range_parser import parse_range
from rustlike.core.types import MISSING, Comparator, Step
from rustlike.operators import (
    ArrayChunks,
    Chain,
    Cycle,
    Enumerate,
    Filter,
    Flat,
    FlatMap,
    Inspect,
    Map,
    Range,
    Reverse,
    Scan,
    Sort,
    StepBy,
    Take,
    TakeWhile,
    TakeWhilePeek,
    Window,
    Zip,
)
from rustlike.operators.base import explain_source


class LazyIterator:
    """
    Chainable lazy iterator

    Chain methods (map, filter, take, ...) return a new LazyIterator and do
    no work until values are pulled. Consuming methods (collect, fold,
    count, ...) pull from the upstream immediately, partly or completely.
    Consuming an endless iterator (cycle(), an open range) without a limit
    never returns.
    """

    def __init__(self, upstream: Iterable[Any]):
        """
        Wrap an iterable without pulling from it

        Args:
            upstream: Any iterable. If it is already an iterator, consuming
                this LazyIterator consumes it too.

        Example:
            >>> it = LazyIterator(iter([1, 2]))
            >>> it.next()
            Step(done=False, value=1)
        """
        self.source = upstream
        self._upstream: Iterator[Any] = iter(upstream)
        self.done = False

    # --------- iteration protocol ----------
    def __iter__(self) -> "LazyIterator":
        return self

    def __next__(self) -> Any:
        step = self.next()
        if step.done:
            raise StopIteration
        return step.value

    def next(self) -> Step:
        """
        Pull exactly one value from the upstream

        Updates ``done`` from the outcome of this pull. ``done`` only reflects
        the last pull; it is not a promise about future ones.

        Returns:
            Step(done, value)
        """
        try:
            value = next(self._upstream)
        except StopIteration:
            self.done = True
            return Step.finished()

        self.done = False
        return Step.of(value)

    def peekable(self) -> "PeekableLazyIterator":
        """Wrap this iterator with one value of look-ahead"""
        return PeekableLazyIterator(self)

    # --------- partial consumers ----------
    def next_chunk(self, n: int) -> Step:
        """
        Pull up to n values at once

        Returns:
            Step whose value is the list of pulled values and whose done flag
            is True if the upstream ran out before n values were pulled
        """
        chunk = []
        for _ in range(n):
            step = self.next()
            if step.done:
                return Step(True, chunk)
            chunk.append(step.value)
        return Step(False, chunk)

    def advance_by(self, n: int) -> "LazyIterator":
        """Pull and discard n values; returns self for chaining"""
        for _ in range(n):
            self.next()
        return self

    def nth(self, n: int) -> Any:
        """Return the value at 0-based position n, or None if there is none"""
        return self.advance_by(n).next().value

    def find(self, predicate: Callable[[Any], Any]) -> Any:
        """
        Return the first value matching the predicate, or None

        Only values up to and including the match are pulled, so the rest
        of the iterator can still be consumed afterwards.
        """
        for value in self:
            if predicate(value):
                return value
        return None

    def position(self, predicate: Callable[[Any], Any]) -> Optional[int]:
        """Return the 0-based index of the first matching value, or None"""
        for index, value in enumerate(self):
            if predicate(value):
                return index
        return None

    def find_index(self, predicate: Callable[[Any], Any]) -> Optional[int]:
        """Alias for position()"""
        return self.position(predicate)

    def any(self, predicate: Callable[[Any], Any]) -> bool:
        """True if some value matches; stops at the first match. False when empty."""
        for value in self:
            if predicate(value):
                return True
        return False

    def all(self, predicate: Callable[[Any], Any]) -> bool:
        """True if every value matches; stops at the first miss. True when empty."""
        for value in self:
            if not predicate(value):
                return False
        return True

    # --------- full consumers ----------
    def collect(self) -> List[Any]:
        """Drain the iterator into a list"""
        return list(self)

    def into(self, container: Callable[[Iterable[Any]], Any]) -> Any:
        """
        Drain the iterator into a container type

        Args:
            container: set, frozenset, dict (values must be key/value pairs),
                or any other type whose constructor takes an iterable

        Example:
            >>> LazyIterator("abc").enumerate().into(dict)
            {0: 'a', 1: 'b', 2: 'c'}
        """
        return container(self)

    def count(self) -> int:
        """Drain the iterator, returning how many values it yielded"""
        total = 0
        while not self.next().done:
            total += 1
        return total

    def last(self) -> Any:
        """Drain the iterator, returning the final value (None if it yielded nothing)"""
        last = None
        for value in self:
            last = value
        return last

    def for_each(self, functor: Callable[[Any], Any]) -> None:
        """Drain the iterator, calling functor with each value"""
        for value in self:
            functor(value)

    def fold(self, functor: Callable[[Any, Any], Any], initial: Any = MISSING) -> Any:
        """
        Drain the iterator into a single accumulated value

        Args:
            functor: Called as functor(accumulator, value), returns the new
                accumulator
            initial: Starting accumulator. When omitted, the first value is
                used instead, so functor first sees the first and second values.

        Returns:
            The final accumulator; None when initial is omitted and the
            iterator is empty
        """
        if initial is MISSING:
            first = self.next()
            if first.done:
                return None
            accumulator = first.value
        else:
            accumulator = initial

        for value in self:
            accumulator = functor(accumulator, value)
        return accumulator

    def reduce(self, functor: Callable[[Any, Any], Any], initial: Any = MISSING) -> Any:
        """fold() where the accumulator has the same type as the values"""
        return self.fold(functor, initial)

    def sum(self) -> Any:
        """
        Add all values together with +

        Well defined for numbers and strings (concatenation). Returns None
        for an empty iterator.
        """
        return self.reduce(operator.add)

    def max(self) -> Any:
        """Largest value by >, the first one on ties; None when empty"""
        return self.reduce(lambda acc, value: value if value > acc else acc)

    def min(self) -> Any:
        """Smallest value by <, the first one on ties; None when empty"""
        return self.reduce(lambda acc, value: value if value < acc else acc)

    # --------- chainable stages (lazy) ----------
    def map(self, functor: Callable[[Any], Any]) -> "LazyIterator":
        return LazyIterator(Map(self, functor))

    def filter(self, predicate: Callable[[Any], Any]) -> "LazyIterator":
        return LazyIterator(Filter(self, predicate))

    def inspect(self, functor: Callable[[Any], Any]) -> "LazyIterator":
        """Call functor with each value as it passes through, for debugging"""
        return LazyIterator(Inspect(self, functor))

    def enumerate(self, start: int = 0) -> "LazyIterator":
        """Yield (index, value) tuples"""
        return LazyIterator(Enumerate(self, start))

    def scan(self, functor: Callable[[List[Any], Any], Any], initial: Any) -> "LazyIterator":
        """
        Yield functor(cell, value) for each value

        ``cell`` is a one-element list holding state shared across calls,
        seeded with ``initial``.
        """
        return LazyIterator(Scan(self, functor, initial))

    def take(self, n: int) -> "LazyIterator":
        """Yield at most n values"""
        return LazyIterator(Take(self, n))

    def take_while(self, predicate: Callable[[Any], Any]) -> "LazyIterator":
        """
        Yield values until one fails the predicate

        The failing value is consumed from this iterator and lost. See
        PeekableLazyIterator.take_while_peek() to keep it.
        """
        return LazyIterator(TakeWhile(self, predicate))

    def step_by(self, n: int) -> "LazyIterator":
        """Yield the first value and then every n-th one"""
        return LazyIterator(StepBy(self, n))

    def chain(self, *others: Iterable[Any]) -> "LazyIterator":
        """Yield all of this iterator, then each of the others in turn"""
        return LazyIterator(Chain(self, *others))

    def zip(self, other: Iterable[Any]) -> "LazyIterator":
        """Yield (mine, theirs) tuples until either side runs out"""
        return LazyIterator(Zip(self, other))

    def flat(self, depth: int = 1) -> "LazyIterator":
        """Flatten nested iterables up to depth levels; text stays whole"""
        return LazyIterator(Flat(self, depth))

    def flat_map(self, functor: Callable[[Any], Any]) -> "LazyIterator":
        """map(functor) followed by flat(1)"""
        return LazyIterator(FlatMap(self, functor))

    def window(self, size: int) -> "LazyIterator":
        """Yield overlapping lists of size consecutive values"""
        return LazyIterator(Window(self, size))

    def array_chunks(self, size: int) -> "LazyIterator":
        """Yield consecutive lists of size values; the last may be shorter"""
        return LazyIterator(ArrayChunks(self, size))

    def cycle(self) -> "LazyIterator":
        """
        Repeat the values forever

        The result never ends on its own; limit it with take(),
        take_while() or find().
        """
        return LazyIterator(Cycle(self))

    def sort(self, comparator: Optional[Comparator] = None) -> "LazyIterator":
        """
        Yield values in ascending order

        This drains the iterator immediately. Sorting work is then done
        one value per pull, so sort().take(k) only pays for k values.
        """
        return LazyIterator(Sort(self, comparator))

    def reverse(self) -> "LazyIterator":
        """Yield values last to first; drains the iterator immediately"""
        return LazyIterator(Reverse(self))

    # --------- introspection & export ----------
    def plan_lines(self, indent: int = 0) -> List[str]:
        """Plan lines for the stages feeding this iterator"""
        return explain_source(self.source, indent)

    def explain(self) -> str:
        """
        Describe the pipeline feeding this iterator

        Returns:
            One stage per line, outermost first, children indented

        Example:
            >>> print(LazyIterator([1, 2, 3]).map(str).take(2).explain())
            Take(2)
              Map(str)
                Source(list)
        """
        return "\n".join(self.plan_lines())

    def to_dataframe(self, column: str = "value"):
        """
        Drain the iterator into a pandas DataFrame

        Dict values become rows keyed by column name; any other values go
        into a single column.

        Args:
            column: Column name used for non-dict values

        Returns:
            pandas.DataFrame
        """
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "Pandas is required for to_dataframe(). Install with: pip install rustlike[pandas]"
            )

        values = self.collect()
        if values and all(isinstance(value, dict) for value in values):
            return pd.DataFrame(values)
        return pd.DataFrame({column: values})

    def __repr__(self) -> str:
        state = "exhausted" if self.done else "active"
        return f"LazyIterator({type(self.source).__name__}, {state})"


class PeekableLazyIterator(LazyIterator):
    """
    LazyIterator with one value of look-ahead

    peek() pulls the next value from the upstream and holds on to it; the
    following next() hands out the held value instead of pulling again.
    The peeked value is therefore gone from the upstream: anyone else
    pulling that upstream directly will not see it.
    """

    def __init__(self, upstream: Iterable[Any]):
        super().__init__(upstream)
        self.peeked: Optional[Step] = None

    def peek(self) -> Step:
        """Return the Step the next call to next() will return"""
        if self.peeked is None:
            self.peeked = super().next()
        return self.peeked

    def next(self) -> Step:
        if self.peeked is not None:
            step, self.peeked = self.peeked, None
            return step
        return super().next()

    def peekable(self) -> "PeekableLazyIterator":
        return self

    def take_while_peek(self, predicate: Callable[[Any], Any]) -> LazyIterator:
        """
        Yield values while they match, leaving the first miss in place

        Unlike take_while(), the value that fails the predicate is only
        peeked at, so the next peek() or next() on this iterator returns it.
        """
        return LazyIterator(TakeWhilePeek(self, predicate))


def range_iter(start: float = 0, end: float = math.inf, step: float = 1) -> LazyIterator:
    """
    Iterate start, start + step, ... while the value is <= end

    Example:
        >>> range_iter(1, 5).collect()
        [1, 2, 3, 4, 5]
    """
    return LazyIterator(Range(start, end, step))


def r(notation: str) -> LazyIterator:
    """
    Iterate a range written in range notation

    Args:
        notation: "<start>..<end>" (end excluded) or "<start>..=<end>"
            (end included); either bound may be left out

    Raises:
        RangeParseError: If the notation is malformed

    Example:
        >>> r("1..5").collect()
        [1, 2, 3, 4]
        >>> r("..=3").collect()
        [0, 1, 2, 3]
    """
    spec = parse_range(notation)
    return range_iter(spec.start, spec.end)


def to_lazy_iterator(collection: Iterable[Any]) -> LazyIterator:
    """
    Adapt any iterable (list, str, set, dict, generator, ...) to a LazyIterator

    Example:
        >>> to_lazy_iterator({"a": 1}.items()).into(dict)
        {'a': 1}
    """
    return LazyIterator(collection)
