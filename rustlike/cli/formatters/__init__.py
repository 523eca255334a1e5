"""
Output formatters for CLI

Available formatters:
- TableFormatter: Rich terminal tables
- JSONFormatter: Machine-readable JSON
- CSVFormatter: Unix-friendly CSV
- MarkdownFormatter: GitHub Flavored Markdown tables
"""

from rustlike.cli.formatters.base import BaseFormatter
from rustlike.cli.formatters.csv import CSVFormatter
from rustlike.cli.formatters.json import JSONFormatter
from rustlike.cli.formatters.markdown import MarkdownFormatter
from rustlike.cli.formatters.table import TableFormatter

__all__ = ["BaseFormatter", "TableFormatter", "JSONFormatter", "CSVFormatter", "MarkdownFormatter"]

FORMATTERS = {
    "table": TableFormatter,
    "json": JSONFormatter,
    "csv": CSVFormatter,
    "markdown": MarkdownFormatter,
}


def get_formatter(format_name: str) -> BaseFormatter:
    """
    Get formatter by name

    Args:
        format_name: Name of formatter (table, json, csv, markdown)

    Returns:
        Formatter instance

    Raises:
        ValueError: If formatter not found
    """
    if format_name not in FORMATTERS:
        available = ", ".join(FORMATTERS.keys())
        raise ValueError(f"Unknown format: {format_name}. Available formats: {available}")

    return FORMATTERS[format_name]()
