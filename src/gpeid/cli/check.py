"""
gpeid CLI - Check command.

Scan files and directories for gpEIDs and report the invalid ones.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from gpeid.cli.errors import ExitCode, print_config_error, print_error
from gpeid.core.check import CheckResult, CheckService, Finding
from gpeid.core.config import ConfigError, load_config

console = Console()


def _finding_to_dict(finding: Finding) -> dict[str, object]:
    return {
        "source": finding.source,
        "line": finding.line,
        "column": finding.column,
        "end_column": finding.end_column,
        "token": finding.token,
        "valid": finding.valid,
        "message": finding.message,
        "diagnostics": [d.model_dump(mode="json") for d in finding.diagnostics],
    }


def _print_summary(result: CheckResult) -> None:
    console.print()
    console.print(
        f"[bold]Checked {result.candidates_checked} gpEID(s) "
        f"in {result.files_checked} file(s)[/bold]"
    )
    if result.files_skipped:
        console.print(f"[yellow]Skipped {len(result.files_skipped)} file(s)[/yellow]")
    if result.has_errors:
        console.print(f"[red]✗ {result.error_count} invalid gpEID(s)[/red]")
    else:
        console.print("[green]✓ No invalid gpEIDs found[/green]")


def main(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Files or directories to scan (default: current directory)"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output findings as JSON"),
    ] = False,
    show_valid: Annotated[
        bool,
        typer.Option("--show-valid", help="Also list valid gpEIDs"),
    ] = False,
) -> None:
    """
    Check documents for invalid gpEIDs.

    Every token shaped like a gpEID (starting with '=' and containing '+',
    '_' and ':' in order) is validated. Directories are searched for the
    file extensions in the configuration. Exits with status 1 if any
    invalid gpEID is found.

    Examples:

        gpeid check docs/

        gpeid check --json equipment.md
    """
    try:
        config = load_config()
    except ConfigError as e:
        print_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)

    if not config.enabled:
        console.print("[dim]gpEID checking is disabled (enabled: false)[/dim]")
        return

    targets = paths or [Path.cwd()]
    missing = [p for p in targets if not p.exists()]
    if missing:
        print_error(
            f"Path not found: {missing[0]}",
            solution="Check the path or run from the project root",
        )
        raise typer.Exit(ExitCode.USER_ERROR)

    service = CheckService(config, keep_valid=show_valid or config.output.show_valid)
    result = service.check_paths(targets)

    if json_output or config.output.format == "json":
        data = {
            "candidates_checked": result.candidates_checked,
            "files_checked": result.files_checked,
            "files_skipped": result.files_skipped,
            "findings": [_finding_to_dict(f) for f in result.findings],
        }
        console.print(
            json.dumps(data, indent=2, ensure_ascii=False),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        for finding in result.findings:
            style = "green" if finding.valid else "red"
            console.print(Text(str(finding), style=style), soft_wrap=True)
        _print_summary(result)

    if result.has_errors:
        raise typer.Exit(ExitCode.INVALID)
