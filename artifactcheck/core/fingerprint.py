"""Fingerprint derivation.

A fingerprint is ``{namespace}/{filter_name}_{suffix}_{hash}`` where the
namespace is ``{owner}/{repo}``.  It is the key for both the blob store
lookup and the CI output names, so it must be a pure function of its
inputs.  Values are concatenated verbatim: no escaping or normalization.
"""

from __future__ import annotations

from artifactcheck.models.artifacts import ArtifactSpec
from artifactcheck.models.hashes import HashTable

BLOB_FILENAME = "artifacts.zip"


def compute_fingerprint(namespace: str, filter_name: str, suffix: str, hash_value: str) -> str:
    """Build the fingerprint for one artifact.

    Raises
    ------
    ValueError
        If any component is empty.
    """
    parts = {
        "namespace": namespace,
        "filter_name": filter_name,
        "suffix": suffix,
        "hash": hash_value,
    }
    empty = [name for name, value in parts.items() if not value]
    if empty:
        raise ValueError(f"Fingerprint components must be non-empty: {', '.join(empty)}")
    return f"{namespace}/{filter_name}_{suffix}_{hash_value}"


def fingerprint_for(artifact: ArtifactSpec, hashes: HashTable, namespace: str) -> str:
    """Fingerprint a manifest entry using the hash table.

    Raises ``MissingHashError`` when the entry's filter has no hash.
    """
    hash_value = hashes.lookup(artifact.filter_name).unwrap()
    return compute_fingerprint(namespace, artifact.filter_name, artifact.suffix, hash_value)


def blob_name_for(fingerprint: str) -> str:
    """Name of the blob whose presence means the artifact already exists."""
    return f"{fingerprint}/{BLOB_FILENAME}"
