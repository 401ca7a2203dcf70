"""CLI command for hekaya convert."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from hekaya.cli.utils.cli_handler import CLIHandler
from hekaya.config import get_logger
from hekaya.parser import parse, serialize

logger = get_logger(__name__)
console = Console()

_SWAPPED_SUFFIXES = {".hekaya": ".fountain", ".fountain": ".hekaya"}


def default_output_path(file: Path) -> Path:
    """Swap ``.hekaya`` and ``.fountain``; otherwise append ``.fountain``."""
    swapped = _SWAPPED_SUFFIXES.get(file.suffix)
    if swapped is not None:
        return file.with_suffix(swapped)
    return file.with_name(f"{file.name}.fountain")


def convert_command(
    file: Annotated[Path, typer.Argument(help="Input .hekaya or .fountain file")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: swaps extension)"),
    ] = None,
) -> None:
    """Convert between .hekaya and .fountain formats."""
    handler = CLIHandler(console)
    output_path = output or default_output_path(file)

    try:
        script = parse(handler.read_script(file))
        handler.write_output(output_path, serialize(script))
    except Exception as e:
        handler.handle_error(e, "converting", file)

    handler.handle_success(f"Converted {file} -> {output_path}")
