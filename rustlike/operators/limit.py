"""
Limit operators - Take, TakeWhile, TakeWhilePeek, StepBy

These stop pulling from their child as soon as they know they are done,
so a limited pipeline over an endless source still terminates.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable

from rustlike.operators.base import Operator, callable_name

_EXHAUSTED = object()


class Take(Operator):
    """
    Take operator - yields at most n values, then stops

    The check happens before each pull, so the child is never asked
    for an (n+1)-th value. A child shorter than n simply ends the
    stage early.
    """

    def __init__(self, child: Iterable[Any], limit: int):
        """
        Initialize take operator

        Args:
            child: Iterable to pull values from
            limit: Maximum number of values to yield
        """
        super().__init__(child)
        self.limit = limit

    def __iter__(self) -> Iterator[Any]:
        if self.limit <= 0:
            return

        count = 0
        for value in self.child:
            yield value
            count += 1
            if count >= self.limit:
                return

    def __repr__(self) -> str:
        return f"Take({self.limit})"


class TakeWhile(Operator):
    """
    TakeWhile operator - yields values until the predicate first fails

    The failing value has already been pulled from the child when the
    predicate sees it, so it is dropped for good. Use TakeWhilePeek on a
    peekable iterator to leave it in place.
    """

    def __init__(self, child: Iterable[Any], predicate: Callable[[Any], Any]):
        super().__init__(child)
        self.predicate = predicate

    def __iter__(self) -> Iterator[Any]:
        for value in self.child:
            if not self.predicate(value):
                return
            yield value

    def __repr__(self) -> str:
        return f"TakeWhile({callable_name(self.predicate)})"


class TakeWhilePeek(Operator):
    """
    TakeWhilePeek operator - TakeWhile that never consumes the failing value

    Works on a peekable iterator: each candidate is inspected with
    ``peek()`` and only consumed with ``next()`` once the predicate holds.
    The first value that fails stays available to the next ``peek()`` or
    ``next()`` on the same peekable.
    """

    def __init__(self, peekable: Any, predicate: Callable[[Any], Any]):
        """
        Initialize take-while-peek operator

        Args:
            peekable: A PeekableLazyIterator (anything with peek() and next()
                returning done/value steps)
            predicate: Values are yielded while this returns a truthy result
        """
        super().__init__(peekable)
        self.predicate = predicate

    def __iter__(self) -> Iterator[Any]:
        peekable = self.child
        while True:
            step = peekable.peek()
            if step.done or not self.predicate(step.value):
                return
            yield peekable.next().value

    def __repr__(self) -> str:
        return f"TakeWhilePeek({callable_name(self.predicate)})"


class StepBy(Operator):
    """
    StepBy operator - yields every n-th value, starting with the first

    After each yielded value the next n-1 values are pulled and dropped.
    """

    def __init__(self, child: Iterable[Any], step: int):
        """
        Initialize step-by operator

        Args:
            child: Iterable to pull values from
            step: Distance between yielded values, at least 1

        Raises:
            ValueError: If step is smaller than 1
        """
        if step < 1:
            raise ValueError(f"StepBy step must be >= 1, got {step}")
        super().__init__(child)
        self.step = step

    def __iter__(self) -> Iterator[Any]:
        iterator = iter(self.child)
        for value in iterator:
            yield value
            for _ in range(self.step - 1):
                if next(iterator, _EXHAUSTED) is _EXHAUSTED:
                    return

    def __repr__(self) -> str:
        return f"StepBy({self.step})"
