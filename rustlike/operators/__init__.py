"""
Pipeline operators - lazy stages for pull-based iteration

Every stage is an Operator that wraps an upstream iterable and yields
values on demand:

- Element-wise: Map, Filter, Inspect, Enumerate, Scan
- Limiting: Take, TakeWhile, TakeWhilePeek, StepBy
- Combining: Chain, Zip, Cycle
- Flattening: Flat, FlatMap
- Grouping: Window, ArrayChunks
- Ordering: Sort, Reverse
- Sources: Range

Example:
    ```python
    from rustlike.operators import Filter, Map, Take

    evens = Take(Filter(Map(range(100), lambda x: x * 3), lambda x: x % 2 == 0), 3)
    print(list(evens))  # [0, 6, 12]
    ```
"""

from rustlike.operators.base import Operator
from rustlike.operators.combine import Chain, Cycle, Zip
from rustlike.operators.flatten import Flat, FlatMap, is_flattenable
from rustlike.operators.grouping import ArrayChunks, Window
from rustlike.operators.limit import StepBy, Take, TakeWhile, TakeWhilePeek
from rustlike.operators.orderby import Reverse, Sort
from rustlike.operators.range import Range
from rustlike.operators.transform import Enumerate, Filter, Inspect, Map, Scan

__all__ = [
    "Operator",
    "Map",
    "Filter",
    "Inspect",
    "Enumerate",
    "Scan",
    "Take",
    "TakeWhile",
    "TakeWhilePeek",
    "StepBy",
    "Chain",
    "Zip",
    "Cycle",
    "Flat",
    "FlatMap",
    "is_flattenable",
    "Window",
    "ArrayChunks",
    "Sort",
    "Reverse",
    "Range",
]
