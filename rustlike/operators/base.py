"""
Base operator class for pull-based iterator pipelines

Every pipeline stage pulls values from its child on demand, exactly
one upstream step per value it needs.
"""

from collections.abc import Iterable, Iterator
from typing import Any, List, Optional


class Operator:
    """
    Base class for all pipeline stages

    Stages form a chain where:
    - Leaf stages (e.g., Range) generate values themselves
    - Inner stages (e.g., Map, Filter) transform their child's values
    - The outermost stage is pulled by a LazyIterator or a for loop

    The pull-based model means:
    - Stages are lazy (generators)
    - Values flow through the chain on demand
    - Nothing upstream runs until something downstream asks for a value
    """

    def __init__(self, child: Optional[Iterable[Any]] = None):
        """
        Initialize operator

        Args:
            child: Iterable to pull values from (None for leaf stages)
        """
        self.child = child

    def __iter__(self) -> Iterator[Any]:
        """
        Run the stage and yield its values

        Subclasses must implement this to define how they process values.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement __iter__()")

    def explain(self, indent: int = 0) -> List[str]:
        """Generate plan lines for this stage and everything upstream of it"""
        lines = [" " * indent + repr(self)]
        lines.extend(explain_source(self.child, indent + 2))
        return lines

    def __repr__(self) -> str:
        """String representation for debugging"""
        return f"{self.__class__.__name__}()"


def explain_source(source: Any, indent: int = 0) -> List[str]:
    """
    Describe an upstream source for plan output

    Operators and LazyIterators describe themselves; anything else is
    reported by its type name.
    """
    if source is None:
        return []
    if isinstance(source, Operator):
        return source.explain(indent)
    if hasattr(source, "plan_lines"):
        return source.plan_lines(indent)
    return [" " * indent + f"Source({type(source).__name__})"]


def callable_name(functor: Any) -> str:
    """Short name of a user callback for plan output"""
    return getattr(functor, "__name__", functor.__class__.__name__)
