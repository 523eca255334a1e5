"""
rustlike - Lazy iterator combinators and a ring-buffer deque for Python

This package provides chainable lazy iterators (map, filter, take, zip,
window, sort, ...), a growable double-ended queue backed by a circular
buffer, and Option / Result types for explicit absence and failure.
"""

__version__ = "0.1.0"

# Main API
from rustlike.containers.ring_deque import RingDeque
from rustlike.core.iterator import (
    LazyIterator,
    PeekableLazyIterator,
    r,
    range_iter,
    to_lazy_iterator,
)
from rustlike.core.option import NOTHING, Option, Some, UnwrapError
from rustlike.core.range_parser import RangeParseError, parse_range
from rustlike.core.result import Err, Ok, Result, try_call
from rustlike.core.types import Step

__all__ = [
    "__version__",
    "LazyIterator",
    "PeekableLazyIterator",
    "RingDeque",
    "Step",
    "r",
    "range_iter",
    "to_lazy_iterator",
    "parse_range",
    "RangeParseError",
    "Option",
    "Some",
    "NOTHING",
    "Result",
    "Ok",
    "Err",
    "try_call",
    "UnwrapError",
]
