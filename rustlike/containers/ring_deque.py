"""
A **growable double-ended queue** on top of a circular buffer.

* push / pop at the back and unshift / shift at the front are amortized O(1).
* The backing list doubles when it is full and an insertion is requested;
  it never shrinks.
* Indexed access is relative to the logical front, whatever the physical
  layout of the buffer is.

Physical layout: the live values occupy ``length`` slots starting at
``head`` and wrapping from ``size - 1`` back to ``0``; ``tail`` is the slot
one past the last value (mod ``size``). When the buffer is full, head == tail.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class RingDeque(Generic[T]):
    """Growable ring-buffer deque.

    Unlike a fixed-size ring, a full RingDeque never overwrites: the next
    insertion doubles the capacity first.
    """

    def __init__(self, initializer: Iterable[T] | int = 0) -> None:
        """
        Args:
            initializer: Either the initial capacity (at least 1 slot is
                always allocated) or an iterable of initial values, which
                fill the buffer exactly (length == size).
        """
        self.head = 0
        self.tail = 0
        if isinstance(initializer, int):
            self.size = max(1, initializer)
            self.buffer: List[Optional[T]] = [None] * self.size
            self.length = 0
        else:
            values = list(initializer)
            self.length = len(values)
            self.size = max(1, self.length)
            self.buffer = values if values else [None]

    # ------------------------------------------------------------------ #
    # constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> RingDeque[T]:
        """Deque holding ``values`` in order, with no spare capacity."""
        return cls(list(values))

    @classmethod
    def from_length(
        cls, length: int, factory: Optional[Callable[[int], T]] = None
    ) -> RingDeque[T]:
        """Deque of ``length`` values, ``factory(i)`` for each index i.

        Without a factory every slot holds None.
        """
        if factory is None:
            return cls([None] * length)
        return cls([factory(i) for i in range(length)])

    # ------------------------------------------------------------------ #
    # back end
    # ------------------------------------------------------------------ #

    def push(self, value: T) -> None:
        """Append one value at the back."""
        self.grow()
        self.buffer[self.tail] = value
        self.tail = (self.tail + 1) % self.size
        self.length += 1

    def pop(self) -> T:
        """Remove and return the value at the back.

        Raises:
            IndexError: If the deque is empty.
        """
        if not self.length:
            raise IndexError("pop from an empty RingDeque")
        self.tail = (self.tail - 1) % self.size
        value = self.buffer[self.tail]
        self.buffer[self.tail] = None
        self.length -= 1
        return value

    # ------------------------------------------------------------------ #
    # front end
    # ------------------------------------------------------------------ #

    def unshift(self, value: T) -> None:
        """Insert one value at the front."""
        self.grow()
        self.head = (self.head - 1) % self.size
        self.buffer[self.head] = value
        self.length += 1

    def shift(self) -> T:
        """Remove and return the value at the front.

        Raises:
            IndexError: If the deque is empty.
        """
        if not self.length:
            raise IndexError("shift from an empty RingDeque")
        value = self.buffer[self.head]
        self.buffer[self.head] = None
        self.head = (self.head + 1) % self.size
        self.length -= 1
        return value

    def extend(self, values: Iterable[T]) -> None:
        """push() every value in order."""
        for value in values:
            self.push(value)

    # ------------------------------------------------------------------ #
    # access
    # ------------------------------------------------------------------ #

    def first(self) -> Optional[T]:
        """Front value without removing it, or None when empty."""
        if not self.length:
            return None
        return self.buffer[self.head]

    def last(self) -> Optional[T]:
        """Back value without removing it, or None when empty."""
        if not self.length:
            return None
        return self.buffer[(self.tail - 1) % self.size]

    def get(self, index: int) -> Optional[T]:
        """Value at logical ``index`` (0 = front), or None outside 0..length-1."""
        if index < 0 or index >= self.length:
            return None
        return self.buffer[(self.head + index) % self.size]

    def at(self, index: int) -> Optional[T]:
        """Like get(), but negative indices count back from the end (-1 = back)."""
        if index < 0:
            index += self.length
        return self.get(index)

    def set(self, index: int, value: T) -> None:
        """Replace the value at logical ``index``.

        Raises:
            IndexError: If index is outside 0..length-1.
        """
        if index < 0 or index >= self.length:
            raise IndexError(f"RingDeque index {index} out of range for length {self.length}")
        self.buffer[(self.head + index) % self.size] = value

    def __getitem__(self, index: int) -> T:
        if index < -self.length or index >= self.length:
            raise IndexError(f"RingDeque index {index} out of range for length {self.length}")
        return self.at(index)

    # ------------------------------------------------------------------ #
    # capacity
    # ------------------------------------------------------------------ #

    def grow(self) -> None:
        """Double the capacity if the buffer is full; no-op otherwise.

        Values wrapped around to the low end (physical slots 0..tail-1) are
        moved into the newly opened slots right after the old capacity, and
        tail moves with them. head and the values from head to the old end
        stay where they are.
        """
        if self.length < self.size:
            return
        old_size = self.size
        self.buffer.extend([None] * old_size)
        for i in range(self.tail):
            self.buffer[old_size + i] = self.buffer[i]
            self.buffer[i] = None
        self.size = old_size * 2
        self.tail += old_size

    # ------------------------------------------------------------------ #
    # iteration
    # ------------------------------------------------------------------ #

    def __iter__(self) -> Iterator[T]:
        buffer, head, size = self.buffer, self.head, self.size
        for i in range(self.length):
            yield buffer[(head + i) % size]

    def to_iter(self):
        """LazyIterator over the values, front to back."""
        from rustlike.core.iterator import LazyIterator

        return LazyIterator(self)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"RingDeque({list(self)!r}, size={self.size})"


__all__ = ["RingDeque"]
