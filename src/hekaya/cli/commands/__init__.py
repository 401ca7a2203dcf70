"""CLI commands for hekaya."""

from hekaya.cli.commands.convert import convert_command
from hekaya.cli.commands.parse import parse_command
from hekaya.cli.commands.validate import validate_command

__all__ = ["convert_command", "parse_command", "validate_command"]
