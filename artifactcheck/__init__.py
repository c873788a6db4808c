"""artifactcheck: content fingerprints and blob-cache existence checks for CI.

For each artifact in a manifest, derives a fingerprint from the repository
namespace, the artifact's filter and suffix, and the filter's content hash,
then checks whether ``{fingerprint}/artifacts.zip`` already exists in blob
storage.  Results are published as step outputs, a JSON file, and a
step-summary table.
"""

__version__ = "0.1.0"

from artifactcheck.core.fingerprint import blob_name_for, compute_fingerprint
from artifactcheck.core.pipeline import run_check
from artifactcheck.core.resolver import FingerprintResolver, resolve_all

__all__ = [
    "FingerprintResolver",
    "blob_name_for",
    "compute_fingerprint",
    "resolve_all",
    "run_check",
    "__version__",
]
