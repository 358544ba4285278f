"""
gpeid CLI - Explain command.

Show the component breakdown of a gpEID.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gpeid.cli.errors import ExitCode
from gpeid.cli.validate import print_result
from gpeid.core.grammar import describe, describe_markdown, validate

console = Console()


def main(
    token: Annotated[str, typer.Argument(help="gpEID string to explain")],
    markdown: Annotated[
        bool,
        typer.Option("--markdown", help="Print the breakdown as markdown"),
    ] = False,
) -> None:
    """
    Show what each part of a gpEID means.

    Invalid tokens are reported the same way as `gpeid validate` and exit
    with status 1.

    Examples:

        gpeid explain '=Site1..Room5+TBD.HLK_TBD.TBD.005:TBD.TBD'

        gpeid explain --markdown '=Haus+HLK_Sensor.001:Siemens.Model-Config.v1'
    """
    result = validate(token.strip())
    if result.identifier is None:
        print_result(result)
        raise typer.Exit(ExitCode.INVALID)

    if markdown:
        console.print(
            describe_markdown(result.identifier), markup=False, emoji=False, soft_wrap=True
        )
        return

    print_result(result)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Component", style="cyan")
    table.add_column("Value")
    for label, text in describe(result.identifier):
        table.add_row(label, Text(text))
    console.print(table)
