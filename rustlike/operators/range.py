"""
Range operator - arithmetic progression source

This is a leaf operator (has no child).
"""

import math
from collections.abc import Iterator
from typing import List, Union

from rustlike.operators.base import Operator

Number = Union[int, float]


class Range(Operator):
    """
    Range operator - yields start, start + step, ... while value <= end

    The end bound is inclusive. With the default end of infinity the
    range never finishes; limit it further down the chain.
    """

    def __init__(self, start: Number = 0, end: Number = math.inf, step: Number = 1):
        """
        Initialize range operator

        Args:
            start: First value yielded
            end: Inclusive upper bound (defaults to infinity)
            step: Increment between values, must be positive

        Raises:
            ValueError: If step is not positive
        """
        if step <= 0:
            raise ValueError(f"Range step must be positive, got {step}")
        super().__init__(child=None)
        self.start = start
        self.end = end
        self.step = step

    def __iter__(self) -> Iterator[Number]:
        value = self.start
        while value <= self.end:
            yield value
            value += self.step

    def is_bounded(self) -> bool:
        """Does this range ever stop?"""
        return not math.isinf(self.end)

    def explain(self, indent: int = 0) -> List[str]:
        return [" " * indent + repr(self)]

    def __repr__(self) -> str:
        return f"Range({self.start}, {self.end}, step={self.step})"
