"""Blob store protocol.

All stores implement the ``BlobStore`` protocol: a ``store_name``
property and an ``exists(blob_name)`` method.  The resolver only ever
asks whether a blob is present; uploads happen elsewhere in the workflow.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStore(Protocol):
    """Protocol that every artifactcheck blob store must implement.

    Attributes
    ----------
    store_name : str
        A human-readable identifier used in logs and error messages
        (e.g. ``"azure:buildcache/artifacts"``).
    """

    @property
    def store_name(self) -> str:
        """Return the name of this store."""
        ...

    def exists(self, blob_name: str) -> bool:
        """Return True if a blob called *blob_name* is present.

        Implementations raise ``StoreUnavailableError`` when the store
        cannot be reached; they must never report an unreachable store as
        a missing blob.
        """
        ...
