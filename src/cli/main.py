"""dingus command line.

Commands:
- `print`: export statements for the current shell (stdout only).
- `session` / `shell`: nested interactive shell with the environment applied.
- `list` / `ls`: implicit file in scope and named configs.
- `doctor`: diagnostics.

Errors are caught here and nowhere else: a `DingusError` becomes a one-line
message on stderr plus the error's exit code.
"""

from __future__ import annotations

import sys
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.config_catalog import build_listing
from adapters.config_locator import current_dir
from cli import doctor
from cli.ui_components import build_listing_panel, print_error, print_session_exit
from core.config import AppSettings
from core.domain.models import ConfigReference, EnvironmentSnapshot
from core.errors import ConfigError, DingusError
from core.logging_config import configure_logging
from core.services.environment_pipeline import (
    EnvironmentRequest,
    render_exports,
    run_session,
)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Apply named sets of environment variables to your shell.",
)

_console = Console(stderr=True, soft_wrap=True)

_CONFIG_HELP = "Config name in the config directory (default: search upwards for .dingus)."
_SHELL_HELP = "Shell to target instead of $SHELL."


def _fail(error: DingusError) -> NoReturn:
    print_error(_console, error)
    raise typer.Exit(code=error.exit_code)


def load_settings() -> AppSettings:
    try:
        return AppSettings.load()
    except ValidationError as exc:
        raise ConfigError(f"invalid DINGUS_* settings: {exc.errors()[0].get('msg', exc)}") from exc


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return load_settings()


def _request(config: str | None, shell: str | None) -> EnvironmentRequest:
    return EnvironmentRequest(
        reference=ConfigReference(name=config),
        start_dir=current_dir(),
        snapshot=EnvironmentSnapshot.capture(),
        shell_override=shell,
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log search/parse/spawn steps to stderr."),
) -> None:
    try:
        settings = load_settings()
    except DingusError as exc:
        _fail(exc)
    configure_logging("DEBUG" if verbose else settings.log_level, console=_console)
    ctx.obj = settings


@app.command("print")
def print_exports(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    shell: Optional[str] = typer.Option(None, "--shell", help=_SHELL_HELP),
) -> None:
    """Print export statements; evaluate them with `eval "$(dingus print)"`."""

    try:
        text = render_exports(settings=_settings(ctx), request=_request(config, shell))
    except DingusError as exc:
        _fail(exc)
    typer.echo(text, nl=False)


@app.command("session")
def session(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    shell: Optional[str] = typer.Option(None, "--shell", help=_SHELL_HELP),
) -> None:
    """Start a nested shell with the environment applied."""

    try:
        status = run_session(settings=_settings(ctx), request=_request(config, shell))
    except DingusError as exc:
        _fail(exc)
    print_session_exit(_console, status)
    raise typer.Exit(code=status)


app.command("shell", hidden=True)(session)


@app.command("list")
def list_configs(ctx: typer.Context) -> None:
    """List the implicit file in scope and the named configs."""

    settings = _settings(ctx)
    try:
        listing = build_listing(settings.config_dir, current_dir(), settings.implicit_filename)
    except DingusError as exc:
        _fail(exc)
    _console.print(build_listing_panel(listing))


app.command("ls", hidden=True)(list_configs)
app.command("doctor")(doctor.run)


def run() -> None:
    # Export statements may carry non-ASCII values; Windows consoles default to cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()
