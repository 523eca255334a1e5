"""
Markdown formatter for documentation and sharing
"""

from typing import Any

from rustlike.cli.formatters.base import BaseFormatter, cell_text


class MarkdownFormatter(BaseFormatter):
    """Format rows as a Markdown table"""

    def format(self, rows: list[dict[str, Any]], **kwargs) -> str:
        """
        Format rows as a Markdown table

        Args:
            rows: List of row dictionaries
            **kwargs: Options like 'show_footer'

        Returns:
            Markdown table string
        """
        if not rows:
            return "_No values._"

        columns = list(rows[0].keys())

        header = "| " + " | ".join(columns) + " |"
        separator = "| " + " | ".join("---:" for _ in columns) + " |"
        data_rows = [
            "| " + " | ".join(cell_text(row[col]).replace("|", "\\|") for col in columns) + " |"
            for row in rows
        ]

        output = "\n".join([header, separator] + data_rows)

        if kwargs.get("show_footer", True):
            count = len(rows)
            output += f"\n\n_{count} value{'s' if count != 1 else ''}_"

        return output
