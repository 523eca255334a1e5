"""Option type for rustlike.

An Option is either Some(value) or NOTHING. Each instance carries an
OptionKind tag and every method dispatches on that tag, so no method relies
on isinstance checks against subclasses.
"""

from enum import Enum
from typing import Any, Callable, Iterator


class UnwrapError(RuntimeError):
    """Raised when unwrapping the wrong variant of an Option or Result"""

    pass


class OptionKind(Enum):
    """Variant tag of an Option."""

    SOME = "Some"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


class Option:
    """A value that may be absent.

    Build instances with ``Some(value)``, ``NOTHING`` or
    ``Option.from_nullable(value)`` rather than calling the constructor.
    """

    __slots__ = ("kind", "_value")

    def __init__(self, kind: OptionKind, value: Any = None):
        self.kind = kind
        self._value = value

    @classmethod
    def from_nullable(cls, value: Any) -> "Option":
        """Some(value) unless value is None, in which case NOTHING."""
        if value is None:
            return NOTHING
        return Some(value)

    def is_some(self) -> bool:
        return self.kind is OptionKind.SOME

    def is_none(self) -> bool:
        return self.kind is OptionKind.NONE

    def unwrap(self) -> Any:
        """Return the contained value.

        Raises:
            UnwrapError: If called on NOTHING.
        """
        if self.kind is OptionKind.SOME:
            return self._value
        raise UnwrapError("called `Option.unwrap()` on a `None` value")

    def expect(self, message: str) -> Any:
        """Return the contained value, failing with ``message`` on NOTHING."""
        if self.kind is OptionKind.SOME:
            return self._value
        raise UnwrapError(f"Error unwrapping None. Expected {message}")

    def unwrap_or(self, default: Any) -> Any:
        if self.kind is OptionKind.SOME:
            return self._value
        return default

    def unwrap_or_else(self, op: Callable[[], Any]) -> Any:
        if self.kind is OptionKind.SOME:
            return self._value
        return op()

    def map(self, op: Callable[[Any], Any]) -> "Option":
        if self.kind is OptionKind.SOME:
            return Some(op(self._value))
        return self

    def map_or(self, op: Callable[[Any], Any], default: Any) -> Any:
        if self.kind is OptionKind.SOME:
            return op(self._value)
        return default

    def map_or_else(self, op: Callable[[Any], Any], op_none: Callable[[], Any]) -> Any:
        if self.kind is OptionKind.SOME:
            return op(self._value)
        return op_none()

    def and_then(self, op: Callable[[Any], "Option"]) -> "Option":
        """Chain an Option-returning operation; NOTHING short-circuits."""
        if self.kind is OptionKind.SOME:
            return op(self._value)
        return self

    def or_else(self, op: Callable[[], "Option"]) -> "Option":
        if self.kind is OptionKind.SOME:
            return self
        return op()

    def filter(self, predicate: Callable[[Any], Any]) -> "Option":
        if self.kind is OptionKind.SOME and predicate(self._value):
            return self
        return NOTHING

    def inspect(self, inspector: Callable[[Any], Any]) -> "Option":
        if self.kind is OptionKind.SOME:
            inspector(self._value)
        return self

    def flatten(self) -> "Option":
        """Remove one level of nesting from Some(Some(x))."""
        if self.kind is OptionKind.SOME and isinstance(self._value, Option):
            return self._value
        return self

    def ok_or(self, error: Any):
        """Convert to a Result: Ok(value) for Some, Err(error) for NOTHING."""
        from rustlike.core.result import Err, Ok

        if self.kind is OptionKind.SOME:
            return Ok(self._value)
        return Err(error)

    def __iter__(self) -> Iterator[Any]:
        if self.kind is OptionKind.SOME:
            yield self._value

    def __bool__(self) -> bool:
        return self.kind is OptionKind.SOME

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.kind is other.kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.kind, self._value))

    def __repr__(self) -> str:
        if self.kind is OptionKind.SOME:
            return f"Some({self._value!r})"
        return "NOTHING"


def Some(value: Any) -> Option:
    """Option holding ``value``."""
    return Option(OptionKind.SOME, value)


NOTHING = Option(OptionKind.NONE)
