"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from adapters.config_catalog import ConfigListing, build_listing
from adapters.config_locator import current_dir
from core.config import AppSettings
from core.domain.models import NESTING_COUNTER, EnvironmentSnapshot
from core.domain.shell import ShellDialect
from core.errors import DingusError
from core.services.projector import parse_level

_console = Console(stderr=True)


def collect_checks(
    settings: AppSettings, snapshot: EnvironmentSnapshot, start_dir: Path | None
) -> list[tuple[str, str, str]]:
    """Rows of (check, status, details) describing the current setup."""

    rows: list[tuple[str, str, str]] = []
    try:
        listing = build_listing(settings.config_dir, start_dir, settings.implicit_filename)
    except DingusError as exc:
        listing = ConfigListing(config_dir=settings.config_dir)
        rows.append(("Config dir", "FAIL", exc.message))
    else:
        if settings.config_dir.is_dir():
            rows.append(("Config dir", "OK", f"{settings.config_dir} ({len(listing.named)} configs)"))
        else:
            rows.append(("Config dir", "MISSING", f"{settings.config_dir} -> only {settings.implicit_filename} files usable"))

    if start_dir is None:
        rows.append(("Implicit file", "FAIL", "current directory is unavailable"))
    elif listing.implicit is not None:
        rows.append(("Implicit file", "OK", str(listing.implicit)))
    else:
        rows.append(("Implicit file", "NONE", f"no {settings.implicit_filename} above {start_dir}"))

    shell = snapshot.shell_path
    if shell:
        rows.append(("Shell", "OK", shell))
    else:
        rows.append(("Shell", "FAIL", "$SHELL is not set -> `session` needs --shell"))
    rows.append(("Dialect", "OK", ShellDialect.detect(shell).label()))

    raw_level = snapshot.get(NESTING_COUNTER)
    rows.append(("Nesting level", "OK", f"{parse_level(raw_level)} ({NESTING_COUNTER}={raw_level or 'unset'})"))
    return rows


def run() -> None:
    """Show the resolved config directory, implicit file, shell and level."""

    settings = AppSettings.load()
    snapshot = EnvironmentSnapshot.capture()
    try:
        start_dir: Path | None = current_dir()
    except DingusError:
        start_dir = None

    table = Table(title="dingus doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    for check, status, details in collect_checks(settings, snapshot, start_dir):
        table.add_row(check, status, details)

    _console.print(table)
