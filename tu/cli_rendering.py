"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and tag-store argument listings (`set:KEY=VALUE`, `clear:KEY`).
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import TagArgument
from .telemetry.logger import RunLogger


def exit_with_command_error(
    command_name: str, exc: Exception, run_logger: RunLogger | None = None
) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if run_logger is not None:
        run_logger.log_command_failure(command_name, type(exc).__name__)
    if isinstance(exc, CommandStageError):
        typer.secho(exc.describe(command_name), fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_assignments(assignments: Iterable[TagArgument], null: bool = False) -> None:
    """Print tag-store arguments, one per line or NUL-terminated with `null`.

    NUL-terminated output is meant for `xargs -0 tagutil` and keeps values
    spanning several lines intact.
    """

    for assignment in assignments:
        if null:
            typer.echo(f"{assignment.as_argument()}\0", nl=False)
        else:
            typer.echo(assignment.as_argument())


def echo_file_assignments(file: str, assignments: Iterable[TagArgument]) -> None:
    """Print a `# FILE` header followed by the file's tag-store arguments."""

    typer.echo(f"# {file}")
    echo_assignments(assignments)
