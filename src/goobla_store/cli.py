"""
goobla-store CLI

Inspection verbs over the model store layout:
- parse: Show how a model reference is interpreted
- manifest-path: Print the manifest file path for a reference
- manifests-dir: Print (and create) the manifests directory
- blob-path: Print the blob path for a digest (or the blobs directory)
"""
from __future__ import annotations

import logging
import typer
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .operations import Operations, OpsConfig, run_and_exit
from .operations.printers import print_blob_location, print_identity, print_json, print_path
from .operations.views import BlobView, IdentityView
from .settings import Settings

app = typer.Typer(name="goobla-store", help="goobla model store paths")


def _configure_logging(verbose: bool) -> None:
    """Route library debug logging to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _create_ops(models_dir: Optional[str], verbose: bool) -> Operations:
    """
    Build the Operations facade for a command.

    Args:
        models_dir: Explicit models directory; environment is used if None
        verbose: Show detailed output
    """
    _configure_logging(verbose)
    settings = Settings(models_dir=models_dir) if models_dir else None
    return Operations(config=OpsConfig(verbose=verbose), settings=settings)


_MODELS_DIR_OPTION = typer.Option(None, "--models-dir", help="Models directory (overrides GOOBLA_MODELS)")
_VERBOSE_OPTION = typer.Option(False, "--verbose", help="Show detailed output")
_JSON_OPTION = typer.Option(False, "--json", help="Print JSON instead of text")


@app.command()
def parse(
    model_ref: str = typer.Argument(..., help="Model reference to parse"),
    json_output: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Show how a model reference is interpreted."""

    def _parse() -> None:
        ops = _create_ops(None, verbose)
        identity = ops.parse(model_ref)
        if json_output:
            print_json(IdentityView.from_identity(identity))
        else:
            print_identity(identity, verbose=verbose)

    run_and_exit(_parse)


@app.command("manifest-path")
def manifest_path(
    model_ref: str = typer.Argument(..., help="Model reference"),
    models_dir: Optional[str] = _MODELS_DIR_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the manifest file path for a model reference."""

    def _manifest_path() -> None:
        ops = _create_ops(models_dir, verbose)
        print_path(ops.manifest_path(model_ref))

    run_and_exit(_manifest_path)


@app.command("manifests-dir")
def manifests_dir(
    models_dir: Optional[str] = _MODELS_DIR_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the manifests directory, creating it if needed."""

    def _manifests_dir() -> None:
        ops = _create_ops(models_dir, verbose)
        print_path(ops.manifests_directory())

    run_and_exit(_manifests_dir)


@app.command("blob-path")
def blob_path(
    digest: str = typer.Argument("", help="Blob digest (sha256:<hex> or sha256-<hex>); omit for the blobs directory"),
    models_dir: Optional[str] = _MODELS_DIR_OPTION,
    json_output: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the blob path for a digest."""

    def _blob_path() -> None:
        ops = _create_ops(models_dir, verbose)
        location = ops.blob_location(digest)
        if json_output:
            print_json(BlobView.from_location(location))
        else:
            print_blob_location(location, verbose=verbose)

    run_and_exit(_blob_path)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
