"""
CSV formatter for Unix-friendly output
"""

import csv
import io
from typing import Any, Dict, List

from rustlike.cli.formatters.base import BaseFormatter, cell_text


class CSVFormatter(BaseFormatter):
    """Format rows as CSV with a header line"""

    def format(self, rows: List[Dict[str, Any]], **kwargs) -> str:
        """
        Format rows as CSV

        Args:
            rows: List of row dictionaries
            **kwargs: Options like 'delimiter'

        Returns:
            CSV string (empty when there are no rows)
        """
        if not rows:
            return ""

        columns = list(rows[0].keys())

        output = io.StringIO()
        writer = csv.DictWriter(
            output,
            fieldnames=columns,
            delimiter=kwargs.get("delimiter", ","),
            lineterminator="\n",
        )
        writer.writeheader()
        for row in rows:
            writer.writerow({col: cell_text(row[col]) for col in columns})

        return output.getvalue()
