"""Command-line interface for jobslug.

Responsibilities:
- Expose slug generation and job path parsing as shell commands.
- Resolve `JobslugConfig` from `--config` YAML or the environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from .cli_rendering import echo_boolean, echo_category_rows, exit_with_command_error
from .config import ConfigLoader, JobslugConfig
from .errors import CommandStageError
from .paths import is_job_application_path, path_to_job_alert_checksum, path_to_job_id
from .taxonomy.categories import CATEGORY
from .telemetry.logger import RunLogger
from .urls import format_job_url

app = typer.Typer(
    name="jobslug",
    no_args_is_help=True,
    help="Job URL slug and path utilities.",
)


@dataclass(slots=True)
class CliState:
    """Global options shared by all commands of one invocation."""

    config_path: Path | None = None
    verbose: bool = False
    run_logger: RunLogger | None = None


def _load_config(config_path: Path | None) -> JobslugConfig:
    """Load config from YAML when requested, else from the environment."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix `JOBSLUG_EXTRA_STOP_WORDS` / `JOBSLUG_VERBOSE` and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_config(state: CliState) -> JobslugConfig:
    """Load config and enable phase logging when either source asks for it."""

    if state.run_logger is not None:
        state.run_logger.log_stage_start("config")
    config = _load_config(state.config_path)
    if state.run_logger is None and config.verbose:
        state.run_logger = RunLogger()
    if state.run_logger is not None:
        state.run_logger.log_stage_complete(
            "config", extra_stop_words=len(config.extra_stop_words)
        )
    return config


def _log_stage(state: CliState, stage: str, **context: object) -> None:
    """Emit a stage-complete event when phase logging is enabled."""

    if state.run_logger is not None:
        state.run_logger.log_stage_complete(stage, **context)


def _fail(state: CliState, command_name: str, exc: Exception) -> NoReturn:
    """Log a failure event, then print diagnostics and exit."""

    if state.run_logger is not None:
        stage = exc.stage if isinstance(exc, CommandStageError) else command_name
        state.run_logger.log_stage_failure(stage, type(exc).__name__)
    exit_with_command_error(command_name, exc)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="YAML config with extra stop words."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Write phase logs to stderr."),
    ] = False,
) -> None:
    """Job URL slug and path utilities."""

    ctx.obj = CliState(
        config_path=config_file,
        verbose=verbose,
        run_logger=RunLogger() if verbose else None,
    )


@app.command("slug")
def slug_command(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Job title or company name.")],
) -> None:
    """Print the URL slug fragment for TEXT."""

    state: CliState = ctx.obj
    try:
        cleaner = _resolve_config(state).build_cleaner()
        slug = cleaner.clean(text)
    except Exception as exc:
        _fail(state, "slug", exc)

    _log_stage(state, "slug", length=len(slug))
    typer.echo(slug)


@app.command("job-url")
def job_url_command(
    ctx: typer.Context,
    uuid: Annotated[str, typer.Argument(help="Opaque job identifier.")],
    title: Annotated[str | None, typer.Option("--title", help="Job title.")] = None,
    company: Annotated[str | None, typer.Option("--company", help="Company name.")] = None,
    category: Annotated[
        str | None,
        typer.Option("--category", help="Category label, e.g. `Information Technology`."),
    ] = None,
) -> None:
    """Print the job detail path for UUID."""

    state: CliState = ctx.obj
    try:
        cleaner = _resolve_config(state).build_cleaner()
        url = format_job_url(
            uuid,
            job_title=title,
            company=company,
            category_label=category,
            cleaner=cleaner,
        )
    except Exception as exc:
        _fail(state, "job-url", exc)

    _log_stage(state, "format", category=category or "none")
    typer.echo(url)


@app.command("job-id")
def job_id_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="URL path of a job or job application.")],
) -> None:
    """Print the job identifier embedded in PATH."""

    state: CliState = ctx.obj
    try:
        job_id = path_to_job_id(path)
        if job_id is None:
            raise CommandStageError(
                stage="parse",
                detail=f"No job id found in path `{path}`.",
                hint="Job paths look like `/job/<category>/<title>-<uuid>`.",
            )
    except Exception as exc:
        _fail(state, "job-id", exc)

    _log_stage(state, "parse", application=is_job_application_path(path))
    typer.echo(job_id)


@app.command("alert-checksum")
def alert_checksum_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="URL path of a job-alert removal link.")],
) -> None:
    """Print the job-alert checksum embedded in PATH."""

    state: CliState = ctx.obj
    try:
        checksum = path_to_job_alert_checksum(path)
        if checksum is None:
            raise CommandStageError(
                stage="parse",
                detail=f"No job-alert checksum found in path `{path}`.",
                hint="Removal paths look like `/jobalert/remove/<name>-<checksum>`.",
            )
    except Exception as exc:
        _fail(state, "alert-checksum", exc)

    _log_stage(state, "parse")
    typer.echo(checksum)


@app.command("is-apply")
def is_apply_command(
    path: Annotated[str, typer.Argument(help="URL path to check.")],
) -> None:
    """Print whether PATH is a job application path."""

    echo_boolean(is_job_application_path(path))


@app.command("categories")
def categories_command() -> None:
    """List category URL segments and labels."""

    echo_category_rows(CATEGORY)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
