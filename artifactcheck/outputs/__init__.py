"""Output sink protocol and publisher.

Sinks receive the finished ``CheckReport`` only after every artifact
resolved successfully, so a failed run never leaves half-written outputs
behind.  Unlike best-effort event routing, a sink failure here fails the
run: the calling workflow depends on every output being present.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from artifactcheck.errors import PublishError
from artifactcheck.models.artifacts import CheckReport

logger = logging.getLogger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Protocol that every output sink must implement."""

    @property
    def sink_name(self) -> str:
        """Return the unique name of this sink."""
        ...

    def publish(self, report: CheckReport) -> None:
        """Write the report to this sink's destination."""
        ...


def publish_all(report: CheckReport, sinks: Sequence[OutputSink]) -> list[str]:
    """Publish *report* to every sink in order, returning the sink names.

    The first failing sink aborts publishing.  Filesystem errors are
    raised as ``PublishError``.
    """
    published: list[str] = []
    for sink in sinks:
        try:
            sink.publish(report)
        except OSError as exc:
            raise PublishError(
                sink.sink_name, f"{sink.sink_name}: cannot publish results: {exc}"
            ) from exc
        logger.debug("Published report to %s", sink.sink_name)
        published.append(sink.sink_name)
    return published
