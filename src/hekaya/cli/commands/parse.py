"""CLI command for hekaya parse."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from hekaya.cli.formatters.json_formatter import JsonFormatter
from hekaya.cli.utils.cli_handler import CLIHandler
from hekaya.cli.validators import ConfigFileValidator
from hekaya.config import get_logger, get_settings_for_cli
from hekaya.parser import ParseOptions, parse

logger = get_logger(__name__)
console = Console()


def parse_command(
    file: Annotated[Path, typer.Argument(help="Input .hekaya or .fountain file")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write JSON here instead of stdout"),
    ] = None,
    pretty: Annotated[
        bool, typer.Option("--pretty/--no-pretty", help="Indent the JSON output")
    ] = True,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Only detect character cues marked with @"),
    ] = False,
    no_registry: Annotated[
        bool,
        typer.Option(
            "--no-registry",
            help="Do not detect previously introduced characters without @",
        ),
    ] = False,
    direction: Annotated[
        str | None,
        typer.Option("--direction", help="Default text direction: rtl, ltr or auto"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
) -> None:
    """Parse a script and output its tokens as JSON."""
    handler = CLIHandler(console)

    try:
        if config is not None:
            config = ConfigFileValidator().validate(config)
        settings = get_settings_for_cli(
            config_file=config,
            cli_overrides={
                "strict_mode": True if strict else None,
                "enable_character_registry": False if no_registry else None,
                "default_direction": direction,
            },
        )
        text = handler.read_script(file)
        script = parse(text, ParseOptions.from_settings(settings))
        result = JsonFormatter(pretty=pretty).format(script)

        if output is not None:
            handler.write_output(output, result)
            handler.handle_success(f"Parsed {file} -> {output}")
        else:
            # Plain print keeps the JSON free of console markup
            print(result)
    except Exception as e:
        handler.handle_error(e, "parsing", file)
