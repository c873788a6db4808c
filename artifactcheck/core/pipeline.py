"""End-to-end check: settings -> inputs -> resolution -> outputs.

Nothing is published until every artifact has resolved, so a failing run
leaves no output files that look valid.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from artifactcheck.config import CheckSettings
from artifactcheck.core.hashes import load_hashes
from artifactcheck.core.manifest import load_manifest
from artifactcheck.core.resolver import FingerprintResolver
from artifactcheck.models.artifacts import CheckReport
from artifactcheck.outputs import OutputSink, publish_all
from artifactcheck.outputs.github import GitHubOutputSink
from artifactcheck.outputs.report import JsonReportSink
from artifactcheck.outputs.summary import StepSummarySink
from artifactcheck.stores import BlobStore
from artifactcheck.stores.factory import build_store

logger = logging.getLogger(__name__)


def default_sinks(settings: CheckSettings) -> list[OutputSink]:
    """The JSON result file first, then the appends to the CI files.

    Step outputs only become visible once the result file is in place.
    """
    return [
        JsonReportSink(settings.output_path),
        GitHubOutputSink(settings.github_output),
        StepSummarySink(settings.step_summary),
    ]


def run_check(
    settings: CheckSettings,
    *,
    store: BlobStore | None = None,
    sinks: Sequence[OutputSink] | None = None,
    local_store: Path | None = None,
) -> CheckReport:
    """Run a full artifact check and publish its results.

    Parameters
    ----------
    settings:
        Run settings.  Validated before anything else happens.
    store:
        Blob store to query.  Built from *settings* (or *local_store*)
        when omitted, and closed again afterwards.
    sinks:
        Output sinks.  Defaults to ``default_sinks(settings)``.
    local_store:
        Directory to use as the store instead of Azure.

    Raises
    ------
    ArtifactCheckError
        Any configuration, input, or store failure.  Nothing is published.
    """
    settings.validate_required(need_store=store is None and local_store is None)

    hashes = load_hashes(settings.hashes_path)
    artifacts = load_manifest(settings.manifest_path)  # type: ignore[arg-type]

    owns_store = store is None
    active_store = store if store is not None else build_store(settings, local_store)
    try:
        resolver = FingerprintResolver(active_store, max_workers=settings.max_workers)
        records = resolver.resolve_all(artifacts, hashes, settings.namespace)
    finally:
        close = getattr(active_store, "close", None)
        if owns_store and callable(close):
            close()

    report = CheckReport(namespace=settings.namespace, records=tuple(records))
    publish_all(report, default_sinks(settings) if sinks is None else sinks)
    logger.info(
        "Checked %d artifacts: %d present, %d missing",
        len(report.records),
        len(report.records) - report.missing_count,
        report.missing_count,
    )
    return report
