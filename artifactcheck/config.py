"""Run configuration — env-driven, GitHub Actions aware.

Centralized settings using pydantic-settings.  Reads from a .env file and
ARTIFACTCHECK_* environment variables; the repository, workspace and CI
output sinks fall back to the variables GitHub Actions exports to every
step.  CLI options override whatever the environment provides.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from artifactcheck.errors import ConfigError

_REPOSITORY_RE = re.compile(r"^[^/\s]+/[^/\s]+$")


class CheckSettings(BaseSettings):
    """Settings for one artifact check run.

    Examples
    --------
    Override via environment::

        export ARTIFACTCHECK_ARTIFACTS_FILE=.github/artifacts.yaml
        export ARTIFACTCHECK_STORAGE_ACCOUNT=buildcache
        export ARTIFACTCHECK_CONTAINER=artifacts
        export ARTIFACTCHECK_MAX_WORKERS=8

    Inside a GitHub Actions job ``GITHUB_REPOSITORY``, ``GITHUB_WORKSPACE``,
    ``GITHUB_OUTPUT`` and ``GITHUB_STEP_SUMMARY`` are picked up directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARTIFACTCHECK_",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Required inputs
    artifacts_file: Path | None = None
    storage_account: str = ""
    container: str = ""
    repository: str = Field(
        default="",
        validation_alias=AliasChoices("ARTIFACTCHECK_REPOSITORY", "GITHUB_REPOSITORY"),
    )

    # Optional shared-key auth; DefaultAzureCredential is used when empty
    account_key: str = ""

    # Local paths, relative to the workspace unless absolute
    workspace: Path = Field(
        default=Path("."),
        validation_alias=AliasChoices("ARTIFACTCHECK_WORKSPACE", "GITHUB_WORKSPACE"),
    )
    hashes_dir: Path = Path(".hashes")
    output_file: Path = Path(".artifacts.json")

    # CI sinks
    github_output: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("ARTIFACTCHECK_GITHUB_OUTPUT", "GITHUB_OUTPUT"),
    )
    step_summary: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("ARTIFACTCHECK_STEP_SUMMARY", "GITHUB_STEP_SUMMARY"),
    )

    # Existence checks
    max_workers: int = Field(default=4, ge=1)

    log_level: str = "INFO"

    @property
    def namespace(self) -> str:
        """Fingerprint namespace, ``{owner}/{repo}``."""
        return self.repository

    def resolve_path(self, path: Path) -> Path:
        """Anchor a relative path at the workspace."""
        return path if path.is_absolute() else self.workspace / path

    @property
    def manifest_path(self) -> Path | None:
        if self.artifacts_file is None:
            return None
        return self.resolve_path(self.artifacts_file)

    @property
    def hashes_path(self) -> Path:
        return self.resolve_path(self.hashes_dir)

    @property
    def output_path(self) -> Path:
        return self.resolve_path(self.output_file)

    def validate_required(self, *, need_store: bool = True) -> None:
        """Raise ``ConfigError`` listing every missing or malformed required input.

        Parameters
        ----------
        need_store:
            Whether the Azure storage account and container are required.
            Runs against a local store only need the manifest and repository.
        """
        problems: list[str] = []
        if self.artifacts_file is None or not str(self.artifacts_file).strip():
            problems.append("artifacts-file input is required")
        if need_store:
            if not self.storage_account:
                problems.append("storage-account input is required")
            if not self.container:
                problems.append("container input is required")
        if not self.repository:
            problems.append("repository (owner/repo) is required")
        elif not _REPOSITORY_RE.match(self.repository):
            problems.append(
                f"repository must be of the form owner/repo, got '{self.repository}'"
            )
        if problems:
            raise ConfigError("; ".join(problems))
