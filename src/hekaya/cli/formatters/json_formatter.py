"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any


class JsonFormatter:
    """JSON formatter for parsed scripts.

    Arabic text is written as-is rather than as ``\\u`` escapes.
    """

    def __init__(self, pretty: bool = True) -> None:
        """Initialize formatter.

        Args:
            pretty: Indent output by two spaces
        """
        self.indent = 2 if pretty else None

    def format(self, data: Any) -> str:
        """Format data as JSON.

        Args:
            data: Data to format; objects with ``to_dict`` are converted first

        Returns:
            JSON string
        """
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        return json.dumps(data, ensure_ascii=False, default=str, indent=self.indent)
