"""``artifactcheck fingerprint`` and ``artifactcheck hashes`` — local inspection.

Neither command contacts the blob store.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from artifactcheck.cli.commands.check import settings_from_options
from artifactcheck.cli.render import ReportRenderer
from artifactcheck.core.fingerprint import fingerprint_for
from artifactcheck.core.hashes import load_hashes
from artifactcheck.errors import ArtifactCheckError, ConfigError
from artifactcheck.models.artifacts import ArtifactSpec

console = Console()


def fingerprint_cmd(
    filter_name: str = typer.Argument(..., help="Filter name (hash file stem)."),
    suffix: str = typer.Argument(..., help="Artifact purpose suffix."),
    repository: Optional[str] = typer.Option(
        None, "--repository", help="Fingerprint namespace, owner/repo."
    ),
    hashes_dir: Optional[Path] = typer.Option(
        None, "--hashes-dir", help="Directory of <filter>.hash files."
    ),
    workspace: Optional[Path] = typer.Option(
        None, "--workspace", help="Root that relative paths are resolved against."
    ),
) -> None:
    """Print the fingerprint for one artifact."""
    try:
        settings = settings_from_options(
            repository=repository, hashes_dir=hashes_dir, workspace=workspace
        )
        if not settings.repository:
            raise ConfigError("repository (owner/repo) is required")
        try:
            artifact = ArtifactSpec(filter_name=filter_name, suffix=suffix)
        except ValidationError as exc:
            raise ConfigError(
                f"Filter name and suffix must be non-empty, got '{filter_name}' and '{suffix}'"
            ) from exc
        hashes = load_hashes(settings.hashes_path)
        fingerprint = fingerprint_for(artifact, hashes, settings.namespace)
    except ArtifactCheckError as exc:
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    typer.echo(fingerprint)


def hashes_cmd(
    hashes_dir: Optional[Path] = typer.Option(
        None, "--hashes-dir", help="Directory of <filter>.hash files."
    ),
    workspace: Optional[Path] = typer.Option(
        None, "--workspace", help="Root that relative paths are resolved against."
    ),
) -> None:
    """List the hash table loaded from the hash directory."""
    try:
        settings = settings_from_options(hashes_dir=hashes_dir, workspace=workspace)
        hashes = load_hashes(settings.hashes_path)
    except ArtifactCheckError as exc:
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    ReportRenderer(console=console).print_hashes(hashes)
