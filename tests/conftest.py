"""Shared test fixtures for artifactcheck."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from artifactcheck.config import CheckSettings
from artifactcheck.models.artifacts import ArtifactSpec
from artifactcheck.models.hashes import HashTable
from artifactcheck.stores.memory import InMemoryBlobStore

_GITHUB_VARS = (
    "GITHUB_REPOSITORY",
    "GITHUB_WORKSPACE",
    "GITHUB_OUTPUT",
    "GITHUB_STEP_SUMMARY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CI runner's own environment out of settings under test."""
    for name in list(os.environ):
        if name.startswith("ARTIFACTCHECK_") or name in _GITHUB_VARS:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def namespace() -> str:
    return "org/repo"


@pytest.fixture
def hash_table() -> HashTable:
    return HashTable(entries={"core": "abc123", "docs": "def456"})


@pytest.fixture
def artifacts() -> list[ArtifactSpec]:
    return [
        ArtifactSpec(filter_name="core", suffix="wheel"),
        ArtifactSpec(filter_name="docs", suffix="site"),
        ArtifactSpec(filter_name="core", suffix="sdist"),
    ]


@pytest.fixture
def memory_store() -> InMemoryBlobStore:
    """A store holding only the core wheel."""
    return InMemoryBlobStore({"org/repo/core_wheel_abc123/artifacts.zip"})


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A workspace with a .hashes directory and an artifacts manifest."""
    hashes = tmp_path / ".hashes"
    hashes.mkdir()
    (hashes / "core.hash").write_text("abc123\n", encoding="utf-8")
    (hashes / "docs.hash").write_text("def456", encoding="utf-8")
    (tmp_path / "artifacts.yaml").write_text(
        "- filter_name: core\n"
        "  suffix: wheel\n"
        "- filter_name: docs\n"
        "  suffix: site\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def make_settings(workspace: Path) -> Callable[..., CheckSettings]:
    """Factory fixture: settings rooted at the test workspace."""

    def _factory(**overrides: Any) -> CheckSettings:
        defaults: dict[str, Any] = {
            "artifacts_file": Path("artifacts.yaml"),
            "storage_account": "buildcache",
            "container": "artifacts",
            "repository": "org/repo",
            "workspace": workspace,
            "github_output": workspace / "github_output.txt",
            "step_summary": workspace / "step_summary.md",
            "max_workers": 2,
        }
        defaults.update(overrides)
        return CheckSettings(**defaults)

    return _factory
