"""
Rich table formatter for terminal output
"""

from typing import Any, Dict, List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rustlike.cli.formatters.base import BaseFormatter, cell_text


class TableFormatter(BaseFormatter):
    """Format rows as a Rich table"""

    def format(self, rows: List[Dict[str, Any]], **kwargs) -> str:
        """
        Format rows as a Rich table

        Args:
            rows: List of row dictionaries
            **kwargs: Options like 'no_color', 'show_footer'

        Returns:
            Rendered table string
        """
        if not rows:
            return "No values."

        console = Console(force_terminal=not kwargs.get("no_color", False))
        columns = list(rows[0].keys())

        table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE)
        for col in columns:
            table.add_column(col, style="cyan", justify="right", overflow="fold")

        for row in rows:
            table.add_row(*(escape(cell_text(row[col])) for col in columns))

        with console.capture() as capture:
            console.print(table)
        output = capture.get()

        if kwargs.get("show_footer", True):
            count = len(rows)
            with console.capture() as capture:
                console.print(f"[dim]{count} value{'s' if count != 1 else ''}[/dim]")
            output += capture.get()

        return output
