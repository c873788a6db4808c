"""Build the blob store for a run from settings."""

from __future__ import annotations

from pathlib import Path

from artifactcheck.config import CheckSettings
from artifactcheck.stores import BlobStore
from artifactcheck.stores.local import LocalBlobStore


def build_store(settings: CheckSettings, local_store: Path | None = None) -> BlobStore:
    """Return a ``LocalBlobStore`` if *local_store* is given, else Azure."""
    if local_store is not None:
        return LocalBlobStore(settings.resolve_path(local_store))

    from artifactcheck.stores.azure_blob import AzureBlobStore

    return AzureBlobStore.from_account(
        settings.storage_account,
        settings.container,
        account_key=settings.account_key,
    )
