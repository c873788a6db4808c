"""Error taxonomy for artifactcheck.

Every error is fatal to a run.  The CLI catches ``ArtifactCheckError``,
reports it, and exits non-zero without publishing any outputs.
"""

from __future__ import annotations


class ArtifactCheckError(RuntimeError):
    """Base class for all artifactcheck failures."""


class ConfigError(ArtifactCheckError):
    """A required input (manifest path, storage account, container, ...) is missing or invalid.

    Raised before any remote call is made.
    """


class MissingHashError(ArtifactCheckError):
    """A manifest entry references a filter with no hash file."""

    def __init__(self, filter_name: str, message: str | None = None) -> None:
        self.filter_name = filter_name
        super().__init__(message or f"No hash found for filter '{filter_name}'")


class StoreUnavailableError(ArtifactCheckError):
    """The blob store could not answer an existence check (network or auth failure)."""

    def __init__(self, blob_name: str, message: str) -> None:
        self.blob_name = blob_name
        super().__init__(message)


class ManifestParseError(ArtifactCheckError):
    """The artifact manifest is malformed."""


class DuplicateArtifactError(ManifestParseError):
    """Two manifest entries resolve to the same ``{filter_name}_{suffix}`` name."""

    def __init__(self, artifact_name: str) -> None:
        self.artifact_name = artifact_name
        super().__init__(f"Duplicate artifact name in manifest: '{artifact_name}'")


class PublishError(ArtifactCheckError):
    """An output sink could not write its results."""

    def __init__(self, sink_name: str, message: str) -> None:
        self.sink_name = sink_name
        super().__init__(message)
