"""UI components for the CLI (Rich).

Why separate components:
- Keeps command functions free of presentation details.
- Everything here renders to a stderr console; stdout belongs to `print`.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from adapters.config_catalog import ConfigListing
from core.errors import DingusError


def print_error(console: Console, error: DingusError) -> None:
    """Report a terminal failure with the stage that produced it."""

    console.print(f"[bold red]error[/bold red] [dim]({error.stage})[/dim]: {escape(error.message)}")


def build_listing_panel(listing: ConfigListing) -> Panel:
    """Panel for `dingus list`."""

    parts: list[Text] = []
    if listing.implicit is not None:
        parts.append(Text.assemble(("Found in path: ", "green"), str(listing.implicit)))

    if listing.named:
        parts.append(Text("Available config files:", style="green"))
        for name in listing.named:
            parts.append(Text(f"- {name}"))
    else:
        parts.append(Text("No valid config files found in config folder.", style="bold"))

    return Panel(
        Group(*parts),
        title=Text(str(listing.config_dir), style="dim"),
        border_style="cyan",
    )


def print_session_exit(console: Console, status: int) -> None:
    suffix = "" if status == 0 else f" (exit status {status})"
    console.print(f"[bold]Exiting dingus session{suffix}[/bold]")
