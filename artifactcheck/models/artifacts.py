"""Artifact manifest entries and resolution results (all frozen)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ArtifactSpec(BaseModel):
    """One manifest entry: which content filter, and what the artifact is for.

    The filter names the repository subtree whose hash identifies changes.
    The suffix names the artifact's purpose so that one subtree can back
    several artifacts.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    filter_name: StrictStr = Field(min_length=1)
    suffix: StrictStr = Field(min_length=1)

    @property
    def artifact_name(self) -> str:
        """Output key for this artifact: ``{filter_name}_{suffix}``."""
        return f"{self.filter_name}_{self.suffix}"


class OutputRecord(BaseModel):
    """Resolution result for a single artifact."""

    model_config = ConfigDict(frozen=True)

    artifact_name: str
    fingerprint: str
    exists: bool


class CheckReport(BaseModel):
    """Ordered results for a whole manifest.

    Records keep manifest order.  Artifact names are unique, so the
    mapping views below never collapse two records into one.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    records: tuple[OutputRecord, ...] = ()

    def fingerprints(self) -> dict[str, str]:
        return {r.artifact_name: r.fingerprint for r in self.records}

    def exists(self) -> dict[str, bool]:
        return {r.artifact_name: r.exists for r in self.records}

    @property
    def missing_count(self) -> int:
        """Number of artifacts with no blob in the store."""
        return sum(1 for r in self.records if not r.exists)

    def result_document(self) -> dict[str, dict[str, Any]]:
        """The JSON result file body: ``{name: {fingerprint, exists}}``."""
        return {
            r.artifact_name: {"fingerprint": r.fingerprint, "exists": r.exists}
            for r in self.records
        }
