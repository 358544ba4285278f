"""
gpeid CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from gpeid import __version__
from gpeid.cli import check, explain, validate
from gpeid.core.config import load_layered_env

# Create the main Typer app
app = typer.Typer(
    name="gpeid",
    help="Validate and explain gpEID asset identifiers",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"gpeid version {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    gpeid - gpEID identifier validator.

    A gpEID tags an asset by location, function, type and product:

        =Gebäude1.Etage2+HLK_Sensor.001:Siemens.ABC123-Config.v1

    Commands:
        gpeid validate TOKEN...      # Validate gpEID strings
        gpeid explain TOKEN          # Show the component breakdown
        gpeid check [PATH...]        # Find invalid gpEIDs in documents
    """
    # Precedence: OS env > project .env > user .env
    load_layered_env()
    setup_logging(debug)

    ctx.obj = {"debug": debug}


app.command(name="validate")(validate.main)
app.command(name="explain")(explain.main)
app.command(name="check")(check.main)


__all__ = ["app", "main"]
