"""``artifactcheck check`` — fingerprint every artifact and check the store.

Reads the hash directory and the artifact manifest, checks the blob
store for each fingerprint, then writes the step outputs, the JSON result
file and the step summary.  Exits 1 on any failure, before anything is
written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from artifactcheck.config import CheckSettings
from artifactcheck.core.pipeline import run_check
from artifactcheck.cli.render import ReportRenderer
from artifactcheck.errors import ArtifactCheckError, ConfigError
from artifactcheck.logging_setup import configure_logging

console = Console()


def settings_from_options(**options: Any) -> CheckSettings:
    """Build settings, letting explicitly passed options win over the environment.

    Invalid values from options, the environment or .env raise ``ConfigError``.
    """
    overrides = {name: value for name, value in options.items() if value is not None}
    try:
        return CheckSettings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def check_cmd(
    artifacts_file: Optional[Path] = typer.Option(
        None, "--artifacts-file", "-f", help="YAML manifest of artifacts to check."
    ),
    storage_account: Optional[str] = typer.Option(
        None, "--storage-account", help="Azure storage account name."
    ),
    container: Optional[str] = typer.Option(
        None, "--container", help="Blob container holding the artifacts."
    ),
    repository: Optional[str] = typer.Option(
        None, "--repository", help="Fingerprint namespace, owner/repo."
    ),
    hashes_dir: Optional[Path] = typer.Option(
        None, "--hashes-dir", help="Directory of <filter>.hash files."
    ),
    workspace: Optional[Path] = typer.Option(
        None, "--workspace", help="Root that relative paths are resolved against."
    ),
    output_file: Optional[Path] = typer.Option(
        None, "--output-file", "-o", help="Where to write the JSON result file."
    ),
    max_workers: Optional[int] = typer.Option(
        None, "--max-workers", min=1, help="Concurrent existence checks."
    ),
    local_store: Optional[Path] = typer.Option(
        None, "--local-store", help="Check a local directory instead of Azure."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Compute artifact fingerprints and check whether they already exist."""
    try:
        settings = settings_from_options(
            artifacts_file=artifacts_file,
            storage_account=storage_account,
            container=container,
            repository=repository,
            hashes_dir=hashes_dir,
            workspace=workspace,
            output_file=output_file,
            max_workers=max_workers,
            log_level=log_level,
        )
        configure_logging(settings.log_level)
        report = run_check(settings, local_store=local_store)
    except ArtifactCheckError as exc:
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    ReportRenderer(console=console).print_report(report)
