"""Result type for rustlike.

A Result is either Ok(value) or Err(error), tagged with ResultKind.
try_call() turns a call that may raise into a Result.
"""

from enum import Enum
from typing import Any, Callable

from rustlike.core.option import NOTHING, Option, Some, UnwrapError


class ResultKind(Enum):
    """Variant tag of a Result."""

    OK = "Ok"
    ERR = "Err"

    def __str__(self) -> str:
        return self.value


class Result:
    """Outcome of an operation that may fail.

    Build instances with ``Ok(value)``, ``Err(error)`` or ``try_call(...)``.
    """

    __slots__ = ("kind", "_payload")

    def __init__(self, kind: ResultKind, payload: Any):
        self.kind = kind
        self._payload = payload

    def is_ok(self) -> bool:
        return self.kind is ResultKind.OK

    def is_err(self) -> bool:
        return self.kind is ResultKind.ERR

    def unwrap(self) -> Any:
        """Return the Ok value.

        On Err, an exception payload is re-raised as is; any other payload
        raises UnwrapError.
        """
        if self.kind is ResultKind.OK:
            return self._payload
        if isinstance(self._payload, BaseException):
            raise self._payload
        raise UnwrapError(f"called `Result.unwrap()` on an `Err` value: {self._payload!r}")

    def unwrap_err(self) -> Any:
        if self.kind is ResultKind.ERR:
            return self._payload
        raise UnwrapError("called `Result.unwrap_err()` on an `Ok` value")

    def expect(self, message: str) -> Any:
        if self.kind is ResultKind.OK:
            return self._payload
        raise UnwrapError(f"{message}: {self._payload!r}")

    def unwrap_or(self, default: Any) -> Any:
        if self.kind is ResultKind.OK:
            return self._payload
        return default

    def unwrap_or_else(self, op: Callable[[Any], Any]) -> Any:
        if self.kind is ResultKind.OK:
            return self._payload
        return op(self._payload)

    def map(self, op: Callable[[Any], Any]) -> "Result":
        if self.kind is ResultKind.OK:
            return Ok(op(self._payload))
        return self

    def map_err(self, op: Callable[[Any], Any]) -> "Result":
        if self.kind is ResultKind.ERR:
            return Err(op(self._payload))
        return self

    def map_or(self, op: Callable[[Any], Any], default: Any) -> Any:
        if self.kind is ResultKind.OK:
            return op(self._payload)
        return default

    def map_or_else(self, op: Callable[[Any], Any], op_err: Callable[[Any], Any]) -> Any:
        if self.kind is ResultKind.OK:
            return op(self._payload)
        return op_err(self._payload)

    def and_then(self, op: Callable[[Any], "Result"]) -> "Result":
        if self.kind is ResultKind.OK:
            return op(self._payload)
        return self

    def or_else(self, op: Callable[[Any], "Result"]) -> "Result":
        if self.kind is ResultKind.ERR:
            return op(self._payload)
        return self

    def inspect(self, inspector: Callable[[Any], Any]) -> "Result":
        if self.kind is ResultKind.OK:
            inspector(self._payload)
        return self

    def inspect_err(self, inspector: Callable[[Any], Any]) -> "Result":
        if self.kind is ResultKind.ERR:
            inspector(self._payload)
        return self

    def ok(self) -> Option:
        """Some(value) for Ok, NOTHING for Err."""
        if self.kind is ResultKind.OK:
            return Some(self._payload)
        return NOTHING

    def err(self) -> Option:
        """Some(error) for Err, NOTHING for Ok."""
        if self.kind is ResultKind.ERR:
            return Some(self._payload)
        return NOTHING

    def flatten(self) -> "Result":
        """Remove one level of nesting from Ok(Result)."""
        if self.kind is ResultKind.OK and isinstance(self._payload, Result):
            return self._payload
        return self

    def __bool__(self) -> bool:
        return self.kind is ResultKind.OK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.kind is other.kind and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self.kind, self._payload))

    def __repr__(self) -> str:
        return f"{self.kind}({self._payload!r})"


def Ok(value: Any) -> Result:
    """Successful Result holding ``value``."""
    return Result(ResultKind.OK, value)


def Err(error: Any) -> Result:
    """Failed Result holding ``error``."""
    return Result(ResultKind.ERR, error)


def try_call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Result:
    """Call ``func`` and capture its outcome.

    Returns:
        Ok(return value), or Err(exception) if func raised an Exception.
        BaseExceptions such as KeyboardInterrupt are not captured.

    Example:
        >>> try_call(int, "42")
        Ok(42)
        >>> try_call(int, "x").is_err()
        True
    """
    try:
        return Ok(func(*args, **kwargs))
    except Exception as e:
        return Err(e)
