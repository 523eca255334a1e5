"""
JSON formatter for machine-readable output
"""

import json
import math
from typing import Any

from rustlike.cli.formatters.base import BaseFormatter


class JSONFormatter(BaseFormatter):
    """Format rows as a JSON array of objects"""

    def format(self, rows: list[dict[str, Any]], **kwargs) -> str:
        """
        Format rows as JSON

        Args:
            rows: List of row dictionaries
            **kwargs: Options like 'compact', 'indent'

        Returns:
            JSON string
        """

        # JSON has no infinity or NaN; emit null instead
        def clean_value(val):
            if isinstance(val, float) and (math.isnan(val) or math.isinf(val)):
                return None
            if isinstance(val, (list, tuple)):
                return [clean_value(item) for item in val]
            return val

        cleaned_rows = [{k: clean_value(v) for k, v in row.items()} for row in rows]

        if kwargs.get("compact", False):
            return json.dumps(cleaned_rows, separators=(",", ":"))
        return json.dumps(cleaned_rows, indent=kwargs.get("indent", 2))
