"""Artifact manifest loading (YAML).

The manifest is a list of mappings, each with ``filter_name`` and
``suffix``::

    - filter_name: core
      suffix: wheel
    - filter_name: docs
      suffix: site
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from artifactcheck.errors import ConfigError, DuplicateArtifactError, ManifestParseError
from artifactcheck.models.artifacts import ArtifactSpec

logger = logging.getLogger(__name__)


def parse_manifest(text: str, source: str = "<manifest>") -> list[ArtifactSpec]:
    """Parse manifest YAML text into validated, unique ``ArtifactSpec`` entries."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"{source}: invalid YAML: {exc}") from exc

    if data is None:
        logger.warning("%s: manifest is empty", source)
        return []
    if not isinstance(data, list):
        raise ManifestParseError(
            f"{source}: expected a list of artifacts, got {type(data).__name__}"
        )

    artifacts = [_parse_entry(entry, index, source) for index, entry in enumerate(data)]
    ensure_unique(artifacts)
    return artifacts


def _parse_entry(entry: Any, index: int, source: str) -> ArtifactSpec:
    if not isinstance(entry, dict):
        raise ManifestParseError(
            f"{source}: entry {index} must be a mapping, got {type(entry).__name__}"
        )
    try:
        return ArtifactSpec.model_validate(entry)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "entry" for err in exc.errors()
        )
        raise ManifestParseError(f"{source}: entry {index} is invalid ({fields}): {exc}") from exc


def ensure_unique(artifacts: Sequence[ArtifactSpec]) -> None:
    """Reject manifests where two entries share an artifact name."""
    seen: set[str] = set()
    for artifact in artifacts:
        name = artifact.artifact_name
        if name in seen:
            raise DuplicateArtifactError(name)
        seen.add(name)


def load_manifest(path: Path) -> list[ArtifactSpec]:
    """Read and parse the manifest file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read artifacts file {path}: {exc}") from exc
    artifacts = parse_manifest(text, source=str(path))
    logger.info("Loaded %d artifacts from %s", len(artifacts), path)
    return artifacts
