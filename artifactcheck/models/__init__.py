"""artifactcheck data models — Pydantic v2, frozen."""

from artifactcheck.models.artifacts import ArtifactSpec, CheckReport, OutputRecord
from artifactcheck.models.hashes import HashLookup, HashTable

__all__ = [
    "ArtifactSpec",
    "OutputRecord",
    "CheckReport",
    "HashLookup",
    "HashTable",
]
