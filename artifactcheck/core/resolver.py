"""Fingerprint resolution and existence checks.

``FingerprintResolver`` turns a manifest plus a hash table into ordered
``OutputRecord`` results.  All fingerprints are computed before the first
remote call, so a missing hash fails the run without touching the store.
Existence checks are independent and read-only; they fan out over a
bounded thread pool and are reassembled by manifest index.

Failure policy: any error aborts the whole resolution.  Checks that have
not started yet are cancelled and no partial result is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from artifactcheck.core.fingerprint import blob_name_for, fingerprint_for
from artifactcheck.core.manifest import ensure_unique
from artifactcheck.errors import StoreUnavailableError
from artifactcheck.models.artifacts import ArtifactSpec, OutputRecord
from artifactcheck.models.hashes import HashTable

if TYPE_CHECKING:
    from artifactcheck.stores import BlobStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


class FingerprintResolver:
    """Resolves fingerprints and their existence in a ``BlobStore``.

    Parameters
    ----------
    store:
        The blob store to query.  Constructed by the caller, so tests can
        pass an in-memory store.
    max_workers:
        Upper bound on concurrent existence checks.  ``1`` runs them
        sequentially in the calling thread.
    """

    def __init__(self, store: BlobStore, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._store = store
        self._max_workers = max_workers

    @property
    def store(self) -> BlobStore:
        return self._store

    # ------------------------------------------------------------------
    # Single check
    # ------------------------------------------------------------------

    def check_exists(self, fingerprint: str) -> bool:
        """Return True if ``{fingerprint}/artifacts.zip`` is in the store."""
        blob_name = blob_name_for(fingerprint)
        try:
            exists = self._store.exists(blob_name)
        except OSError as exc:
            raise StoreUnavailableError(
                blob_name, f"{self._store.store_name}: cannot check {blob_name}: {exc}"
            ) from exc
        logger.info("Blob %s exists: %s", blob_name, exists)
        return exists

    # ------------------------------------------------------------------
    # Whole manifest
    # ------------------------------------------------------------------

    def resolve_all(
        self,
        artifacts: Sequence[ArtifactSpec],
        hashes: HashTable,
        namespace: str,
    ) -> list[OutputRecord]:
        """Resolve every artifact, preserving manifest order."""
        ensure_unique(artifacts)
        fingerprints = [fingerprint_for(a, hashes, namespace) for a in artifacts]

        if not fingerprints:
            return []

        if self._max_workers == 1 or len(fingerprints) == 1:
            flags = [self.check_exists(fp) for fp in fingerprints]
        else:
            flags = self._check_concurrently(fingerprints)

        records = [
            OutputRecord(artifact_name=a.artifact_name, fingerprint=fp, exists=flag)
            for a, fp, flag in zip(artifacts, fingerprints, flags)
        ]
        for record in records:
            logger.info(
                "Artifact fingerprint: %s - exists: %s", record.fingerprint, record.exists
            )
        return records

    def _check_concurrently(self, fingerprints: list[str]) -> list[bool]:
        results: dict[int, bool] = {}
        futures: dict[Future[bool], int] = {}
        workers = min(self._max_workers, len(fingerprints))

        with ThreadPoolExecutor(max_workers=workers) as executor:
            for index, fingerprint in enumerate(fingerprints):
                futures[executor.submit(self.check_exists, fingerprint)] = index

            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                except Exception:
                    logger.error("Existence check failed for %s", fingerprints[index])
                    for pending in futures:
                        pending.cancel()
                    raise

        return [results[i] for i in range(len(fingerprints))]


def resolve_all(
    artifacts: Sequence[ArtifactSpec],
    hashes: HashTable,
    namespace: str,
    store: BlobStore,
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[OutputRecord]:
    """Convenience wrapper around ``FingerprintResolver.resolve_all``."""
    return FingerprintResolver(store, max_workers=max_workers).resolve_all(
        artifacts, hashes, namespace
    )
