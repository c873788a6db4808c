"""Markdown table appended to the GitHub step summary."""

from __future__ import annotations

import logging
from pathlib import Path

from artifactcheck.models.artifacts import CheckReport

logger = logging.getLogger(__name__)


def render_summary(report: CheckReport) -> str:
    lines = [
        "",
        "",
        "## Artifacts",
        "",
        "|Artifact| Fingerprint| Exists|",
        "|---|---|---|",
    ]
    for r in report.records:
        lines.append(f"|{r.artifact_name}| {r.fingerprint}| {str(r.exists).lower()}|")
    return "\n".join(lines) + "\n"


class StepSummarySink:
    """Appends the results table to ``$GITHUB_STEP_SUMMARY`` when it is set."""

    def __init__(self, summary_path: Path | None) -> None:
        self._path = Path(summary_path) if summary_path else None

    @property
    def sink_name(self) -> str:
        return "step_summary"

    def publish(self, report: CheckReport) -> None:
        if self._path is None:
            logger.debug("GITHUB_STEP_SUMMARY not set; skipping summary")
            return
        text = render_summary(report)
        with self._path.open("a", encoding="utf-8") as fh:
            fh.write(text)
