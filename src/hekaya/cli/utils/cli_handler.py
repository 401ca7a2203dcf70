"""Unified CLI handler for standardized error handling and script I/O."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from hekaya.cli.validators.file_validator import FileValidator
from hekaya.config import get_logger
from hekaya.exceptions import HekayaError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.file_validator = FileValidator()

    def read_script(self, path: Path) -> str:
        """Validate ``path`` and read it as UTF-8 text."""
        validated = self.file_validator.validate(path)
        logger.debug("Reading script", path=str(validated))
        return validated.read_text(encoding="utf-8")

    def write_output(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path`` as UTF-8 text."""
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote output", path=str(path), chars=len(content))

    def handle_error(
        self, error: Exception, action: str, path: Path, exit_code: int = 1
    ) -> NoReturn:
        """Report an error and exit.

        Args:
            error: Exception to handle
            action: Verb describing the failed command, e.g. "parsing"
            path: The input file being processed
            exit_code: Exit code to use
        """
        logger.error(
            "Command failed", action=action, path=str(path), error=str(error)
        )
        message = error.message if isinstance(error, HekayaError) else str(error)
        self.console.print(
            f"[red]Error {action} {escape(str(path))}:[/red] {escape(message)}"
        )
        if isinstance(error, HekayaError) and error.hint:
            self.console.print(f"[dim]Hint: {escape(error.hint)}[/dim]")
        raise typer.Exit(exit_code)

    def handle_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]{escape(message)}[/green]")
