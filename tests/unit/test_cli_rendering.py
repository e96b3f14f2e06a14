"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from jobslug.cli_rendering import echo_boolean, echo_category_rows, exit_with_command_error
from jobslug.errors import CommandStageError
from jobslug.models.datatypes import Category


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="parse",
        detail="No job id found in path `/careers`.",
        hint="Job paths look like `/job/<category>/<title>-<uuid>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("job-id", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "job-id failed at stage `parse`: No job id found in path `/careers`." in captured.err
    assert "Hint: Job paths look like `/job/<category>/<title>-<uuid>`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("slug", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "slug failed: unexpected failure" in captured.err


def test_echo_helpers_render_rows_and_boolean_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    """Category rows should be tab-separated and booleans lowercase."""

    echo_category_rows(
        {"LEGAL": Category(id="legal", label="Legal", value="Legal", url="legal")}
    )
    echo_boolean(True)
    echo_boolean(False)

    assert capsys.readouterr().out == "legal\tLegal\ntrue\nfalse\n"


def test_command_stage_error_keeps_detail_as_message() -> None:
    """Stage errors should expose their parts and a one-line headline."""

    error = CommandStageError(stage="config", detail="Config file not found.")

    assert str(error) == "Config file not found."
    assert error.hint is None
    assert error.headline("slug") == "slug failed at stage `config`: Config file not found."
