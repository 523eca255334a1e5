"""
Range Notation Parser - Parse start..end and start..=end syntax

Provides utilities to turn compact range notation into numeric bounds and
back again.
"""

import math
import re
from typing import NamedTuple, Union

RANGE_PATTERN = re.compile(r"^(\d*)\.\.(=?)(\d*)$")

Bound = Union[int, float]


class RangeParseError(ValueError):
    """Raised when range notation parsing fails"""
    pass


class RangeSpec(NamedTuple):
    """Parsed range: first value and inclusive last value (may be infinite)"""

    start: int
    end: Bound

    @property
    def is_bounded(self) -> bool:
        return not math.isinf(self.end)


def parse_range(notation: str) -> RangeSpec:
    """
    Parse range notation into a start and an inclusive end

    Syntax: <start>..<end> or <start>..=<end>

    Examples:
        "1..5" → RangeSpec(1, 4)
        "1..=5" → RangeSpec(1, 5)
        "..5" → RangeSpec(0, 4)
        "3.." → RangeSpec(3, inf)
        ".." → RangeSpec(0, inf)

    Args:
        notation: Range notation; surrounding whitespace is ignored

    Returns:
        RangeSpec with
        - start: First value (0 when omitted)
        - end: Last value, inclusive (infinity when omitted)

    Raises:
        RangeParseError: If the notation does not match the syntax
    """
    if not isinstance(notation, str):
        raise RangeParseError(
            f"Range notation must be a string, got {type(notation).__name__}"
        )

    match = RANGE_PATTERN.match(notation.strip())
    if not match:
        raise RangeParseError(
            f"Invalid range: '{notation}'. "
            f"Expected <start>..<end> or <start>..=<end> with non-negative integers"
        )

    start_part, inclusive, end_part = match.groups()
    start = int(start_part) if start_part else 0

    if not end_part:
        return RangeSpec(start, math.inf)

    end = int(end_part)
    if not inclusive:
        end -= 1

    return RangeSpec(start, end)


def build_range(start: int = 0, end: Bound = math.inf, inclusive: bool = False) -> str:
    """
    Build range notation from bounds

    Args:
        start: First value
        end: Upper bound (infinity leaves it open)
        inclusive: Whether end is part of the range

    Returns:
        Notation string

    Examples:
        - build_range(1, 5) → "1..5"
        - build_range(1, 5, inclusive=True) → "1..=5"
        - build_range(3) → "3.."
    """
    start_part = str(start) if start else ""

    if math.isinf(end):
        return f"{start_part}.."

    if inclusive:
        return f"{start_part}..={int(end)}"
    return f"{start_part}..{int(end)}"
