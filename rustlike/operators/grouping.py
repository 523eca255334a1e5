"""
Grouping operators - Window, ArrayChunks

Both keep a small buffer of recent values and yield lists built from it.
"""

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, List

from rustlike.operators.base import Operator


class Window(Operator):
    """
    Window operator - yields overlapping runs of n consecutive values

    Nothing is yielded until n values have arrived. From then on each new
    value pushes the oldest one out and a fresh list snapshot of the n
    current values is yielded, so successive windows share n-1 values.
    A child with fewer than n values yields no windows at all.

    Example:
        >>> list(Window([1, 2, 3, 4], 3))
        [[1, 2, 3], [2, 3, 4]]
    """

    def __init__(self, child: Iterable[Any], size: int):
        """
        Initialize window operator

        Args:
            child: Iterable to pull values from
            size: Number of values per window, at least 1

        Raises:
            ValueError: If size is smaller than 1
        """
        if size < 1:
            raise ValueError(f"Window size must be >= 1, got {size}")
        super().__init__(child)
        self.size = size

    def __iter__(self) -> Iterator[List[Any]]:
        buffer = deque(maxlen=self.size)
        for value in self.child:
            buffer.append(value)
            if len(buffer) == self.size:
                yield list(buffer)

    def __repr__(self) -> str:
        return f"Window({self.size})"


class ArrayChunks(Operator):
    """
    ArrayChunks operator - yields consecutive non-overlapping chunks

    Every chunk holds exactly n values except possibly the last, which
    holds whatever was left when the child ran out.
    """

    def __init__(self, child: Iterable[Any], size: int):
        """
        Initialize array-chunks operator

        Args:
            child: Iterable to pull values from
            size: Number of values per chunk, at least 1

        Raises:
            ValueError: If size is smaller than 1
        """
        if size < 1:
            raise ValueError(f"Chunk size must be >= 1, got {size}")
        super().__init__(child)
        self.size = size

    def __iter__(self) -> Iterator[List[Any]]:
        chunk = []
        for value in self.child:
            chunk.append(value)
            if len(chunk) == self.size:
                yield chunk
                chunk = []

        if chunk:
            yield chunk

    def __repr__(self) -> str:
        return f"ArrayChunks({self.size})"
