"""Local directory blob store.

Layout: {base_path}/{blob_name}, with ``/`` in the blob name mapped to
subdirectories, mirroring how a container is browsed.  Useful for running
the check against a synced copy of the cache or in a local workflow
runner with no cloud access.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from artifactcheck.errors import StoreUnavailableError


class LocalBlobStore:
    """Read-only view of a directory as a blob container.

    Parameters
    ----------
    base_path:
        Root directory standing in for the container.
    """

    def __init__(self, base_path: Path | str) -> None:
        self._base = Path(base_path)

    @property
    def store_name(self) -> str:
        return f"local:{self._base}"

    def _blob_path(self, blob_name: str) -> Path:
        parts = PurePosixPath(blob_name).parts
        if not parts or ".." in parts or PurePosixPath(blob_name).is_absolute():
            raise StoreUnavailableError(
                blob_name, f"{self.store_name}: invalid blob name {blob_name!r}"
            )
        return self._base.joinpath(*parts)

    def exists(self, blob_name: str) -> bool:
        """Check for a regular file at the blob's path.

        Raises ``OSError`` (``FileNotFoundError``) when the base directory
        itself is gone, so a missing mount is not mistaken for a cache miss.
        Names that would leave the base directory raise
        ``StoreUnavailableError``.
        """
        if not self._base.is_dir():
            raise FileNotFoundError(f"Store directory not found: {self._base}")
        return self._blob_path(blob_name).is_file()
