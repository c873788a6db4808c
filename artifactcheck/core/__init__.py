"""Core resolution logic: hashes, manifest, fingerprints, existence checks."""

from artifactcheck.core.fingerprint import blob_name_for, compute_fingerprint
from artifactcheck.core.resolver import FingerprintResolver, resolve_all

__all__ = ["FingerprintResolver", "blob_name_for", "compute_fingerprint", "resolve_all"]
