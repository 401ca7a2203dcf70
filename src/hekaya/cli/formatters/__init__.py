"""Output formatters for CLI commands."""

from hekaya.cli.formatters.json_formatter import JsonFormatter

__all__ = ["JsonFormatter"]
