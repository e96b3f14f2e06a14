"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and category listing rows.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import Category


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(exc.headline(command_name), fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_category_rows(categories: Mapping[str, Category]) -> None:
    """Print `<url>\\t<label>` rows in table order."""

    for category in categories.values():
        typer.echo(f"{category.url}\t{category.label}")


def echo_boolean(value: bool) -> None:
    """Print a lowercase boolean token."""

    typer.echo("true" if value else "false")
