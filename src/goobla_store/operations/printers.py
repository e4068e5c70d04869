"""
Human-readable output formatting.

Centralizes all CLI output formatting while keeping CLI commands thin and
focused.
"""
from __future__ import annotations

from pathlib import Path

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..storage.layout import BlobLocation
from ..storage.reference import ModelIdentity

_console = Console()
_err_console = Console(stderr=True)


def print_identity(identity: ModelIdentity, verbose: bool = False) -> None:
    """
    Print a parsed model identity.

    Shows every identity field and the derived names.

    Args:
        identity: Parsed identity to display
        verbose: Also show the registry base URL
    """
    table = Table(title="Model reference")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="yellow")

    table.add_row("scheme", escape(identity.protocol_scheme))
    table.add_row("registry", escape(identity.registry))
    table.add_row("namespace", escape(identity.namespace))
    table.add_row("repository", escape(identity.repository) or "[dim]<empty>[/]")
    table.add_row("tag", escape(identity.tag))
    _console.print(table)

    _console.print(f"[bold]Full name:[/] {escape(identity.full_tag_name)}", highlight=False)
    _console.print(f"[bold]Short name:[/] {escape(identity.short_tag_name)}", highlight=False)
    if verbose:
        _console.print(f"[bold]Base URL:[/] {escape(identity.base_url)}", highlight=False)


def print_path(path: Path) -> None:
    """
    Print a bare path.

    Plain output so the result can be used in shell substitutions.
    """
    typer.echo(str(path))


def print_blob_location(location: BlobLocation, verbose: bool = False) -> None:
    """
    Print a resolved blob path.

    Args:
        location: Blob location
        verbose: Also show whether the legacy or sharded layout was chosen
    """
    typer.echo(str(location.path))
    if verbose:
        _err_console.print(f"[dim]layout: {location.layout.value}[/]")


def print_error(exc: BaseException) -> None:
    """Print an error message to stderr."""
    _err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)


def print_json(view: BaseModel) -> None:
    """Print a view as indented JSON."""
    typer.echo(view.model_dump_json(indent=2))
