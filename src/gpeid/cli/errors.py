"""
Standardized error handling and exit codes for the gpeid CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for gpeid CLI operations."""

    SUCCESS = 0
    """Every gpEID checked was valid."""

    INVALID = 1
    """At least one invalid gpEID was found."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid configuration",
        ...     reason="output.format must be 'text' or 'json'",
        ...     solution="Edit .gpeid.json",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}")


def print_config_error(error: Exception) -> None:
    """Print error when the merged configuration does not validate."""
    print_error(
        "Invalid gpeid configuration",
        reason=str(error),
        solution="Fix .gpeid.json, ~/.config/gpeid/config.json or the GPEID_* variables",
    )


def print_no_input_error() -> None:
    """Print error when a command was given nothing to validate."""
    print_error(
        "No gpEID given",
        reason="Pass one or more gpEID strings to validate",
        solution="gpeid validate '=Haus+HLK_Sensor.001:Siemens.Model'",
    )


__all__ = [
    "ExitCode",
    "print_error",
    "print_config_error",
    "print_no_input_error",
]
