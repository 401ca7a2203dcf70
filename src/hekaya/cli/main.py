"""Main CLI entry point."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from hekaya import __version__
from hekaya.cli.commands import convert_command, parse_command, validate_command
from hekaya.config import configure_logging, get_logger, get_settings, set_settings

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="hekaya",
    help="Parse, convert and validate Hekaya/Fountain screenplays",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command(name="parse")(parse_command)
app.command(name="convert")(convert_command)
app.command(name="validate")(validate_command)


@app.command()
def version() -> None:
    """Show the hekaya version."""
    console.print(f"Hekaya v{__version__}")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging", envvar="HEKAYA_DEBUG"),
    ] = False,
) -> None:
    """Configure global options."""
    if not (debug or verbose):
        return

    updates = {"debug": True, "log_level": "DEBUG"} if debug else {"log_level": "INFO"}
    settings = get_settings().model_copy(update=updates)
    set_settings(settings)
    configure_logging(settings)
    if debug:
        logger.debug("Debug mode enabled")
    else:
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
