"""
gpeid CLI - Validate command.

Validate gpEID strings given on the command line.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from gpeid.cli.errors import ExitCode, print_config_error, print_no_input_error
from gpeid.core.config import ConfigError, load_config
from gpeid.core.grammar import ValidationResult, validate

console = Console()


def render_markers(result: ValidationResult) -> Text:
    """
    Render the token with one caret line per diagnostic.

    Example output:
        =Building+HLK_Sensor.000:Vendor.Product
                             ^^^ Counter cannot be '000'
    """
    text = Text("  ")
    text.append(result.token, style="bold")
    for diagnostic in result.diagnostics:
        text.append("\n  ")
        text.append(" " * diagnostic.offset)
        text.append("^" * diagnostic.length, style="red")
        text.append(f" {diagnostic.message}", style="yellow")
    return text


def print_result(result: ValidationResult) -> None:
    """Print a validation result for humans."""
    if result.valid:
        console.print(Text.assemble(("✓ Valid gpEID: ", "green"), result.token), soft_wrap=True)
        return
    console.print(
        Text.assemble(("✗ Invalid gpEID: ", "red"), result.summary()),
        soft_wrap=True,
    )
    console.print(render_markers(result), soft_wrap=True)


def main(
    tokens: Annotated[
        list[str] | None,
        typer.Argument(help="gpEID strings to validate"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """
    Validate one or more gpEID strings.

    Surrounding whitespace is ignored. Exits with status 1 if any token is
    invalid.

    Examples:

        gpeid validate '=Gebäude1+HLK_Sensor.001:Siemens.ABC123'

        gpeid validate --json '=Building+HLK_Sensor.000:Vendor.Product'
    """
    if not tokens:
        print_no_input_error()
        raise typer.Exit(ExitCode.USER_ERROR)

    try:
        config = load_config()
    except ConfigError as e:
        print_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    results = [validate(token.strip()) for token in tokens]

    if json_output or config.output.format == "json":
        data = [result.model_dump(mode="json") for result in results]
        console.print(
            json.dumps(data, indent=2, ensure_ascii=False),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        for result in results:
            print_result(result)

    if not all(result.valid for result in results):
        raise typer.Exit(ExitCode.INVALID)
