"""
Base formatter interface for CLI output

All formatters turn a list of rows (dicts with the same keys) into text.
"""

from typing import Any, Dict, List


class BaseFormatter:
    """Base class for all output formatters"""

    def format(self, rows: List[Dict[str, Any]], **kwargs) -> str:
        """
        Format pipeline output rows

        Args:
            rows: List of row dictionaries
            **kwargs: Additional formatter-specific options

        Returns:
            Formatted string ready for output
        """
        raise NotImplementedError("Formatters must implement format() method")

    def get_name(self) -> str:
        """Get formatter name"""
        return self.__class__.__name__.replace("Formatter", "").lower()


def cell_text(value: Any) -> str:
    """Render one cell value; lists (windows, chunks) are shown inline"""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(cell_text(item) for item in value) + "]"
    return str(value)
