"""CLI interface for vcprompt."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vcprompt import __version__
from vcprompt.config import ConfigError, PromptConfig
from vcprompt.core.models import Status
from vcprompt.core.status import collect_status
from vcprompt.formatter import Shell, format_status
from vcprompt.runners.status import VcsNotFoundError

app = typer.Typer(
    name="vcprompt",
    help="Version control information in your prompt.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vcprompt {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )


def _display_details(status: Status) -> None:
    """Print all status fields as a table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("VCS", f"{status.name} ({status.symbol})")
    table.add_row("Branch", status.branch)
    table.add_row("Ahead", str(status.ahead))
    table.add_row("Behind", str(status.behind))
    table.add_row("Staged", str(status.staged))
    table.add_row("Changed", str(status.changed))
    table.add_row("Untracked", str(status.untracked))
    table.add_row("Conflicts", str(status.conflicts))
    table.add_row("Operations", ", ".join(status.operations) or "-")

    console.print(table)


@app.command()
def main(
    cwd: Annotated[
        Path | None,
        typer.Option(
            "--cwd",
            "-c",
            help="Use this directory as CWD",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    shell: Annotated[
        Shell,
        typer.Option("--shell", "-s", help="Escape the output for this shell's prompt variable"),
    ] = Shell.PLAIN,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", envvar="VCP_CONFIG", help="YAML file overriding VCP_* settings"),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Do not colorize the output"),
    ] = False,
    details: Annotated[
        bool,
        typer.Option("--details", help="Show all status fields instead of the prompt string"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug information to stderr"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Print the status of the repository containing the current directory.

    Prints nothing when there is no repository or its status is unavailable.
    """
    _setup_logging(verbose)

    try:
        config = PromptConfig.load(config_path)
    except ConfigError as e:
        err_console.print(f"[red]vcprompt: {escape(str(e))}[/red]")
        raise typer.Exit(2) from e
    if no_color:
        config = config.model_copy(update={"color": False})

    try:
        status = collect_status(cwd)
    except VcsNotFoundError as e:
        err_console.print(f"[red]vcprompt: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if status is None:
        return

    if details:
        _display_details(status)
        return

    # Keep escape sequences when stdout is a pipe, as in PS1="$(vcprompt)"
    typer.echo(format_status(status, config, shell), color=True)
