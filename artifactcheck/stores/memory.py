"""In-memory blob store, for tests and dry runs."""

from __future__ import annotations

import threading
from collections.abc import Iterable


class InMemoryBlobStore:
    """A set of blob names guarded by a lock.

    Parameters
    ----------
    blobs:
        Blob names present from the start.
    """

    def __init__(self, blobs: Iterable[str] = ()) -> None:
        self._blobs = set(blobs)
        self._lock = threading.Lock()
        self.queries: list[str] = []

    @property
    def store_name(self) -> str:
        return "memory"

    def add(self, blob_name: str) -> None:
        with self._lock:
            self._blobs.add(blob_name)

    def exists(self, blob_name: str) -> bool:
        with self._lock:
            self.queries.append(blob_name)
            return blob_name in self._blobs
