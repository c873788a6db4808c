"""GitHub Actions step outputs.

Appends ``name=value`` lines to the file named by ``$GITHUB_OUTPUT``.
Per artifact:

- ``artifact_fingerprint_<name>``: the fingerprint, used to fetch/store the artifact
- ``artifact_exists_<name>``: ``true`` or ``false``

Aggregates: ``fingerprint`` and ``exists`` (compact JSON mappings keyed by
artifact name) and ``artifact_result_key``.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path

from artifactcheck.models.artifacts import CheckReport

logger = logging.getLogger(__name__)

ARTIFACT_RESULT_KEY = "artifact_summary"


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def format_output(name: str, value: object) -> str:
    """One ``$GITHUB_OUTPUT`` entry, using the heredoc form for multi-line values."""
    text = format_value(value)
    if "\n" in text or "\r" in text:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        return f"{name}<<{delimiter}\n{text}\n{delimiter}\n"
    return f"{name}={text}\n"


def build_outputs(report: CheckReport) -> dict[str, object]:
    """All step outputs for *report*, in the order they are written."""
    outputs: dict[str, object] = {}
    for record in report.records:
        outputs[f"artifact_fingerprint_{record.artifact_name}"] = record.fingerprint
        outputs[f"artifact_exists_{record.artifact_name}"] = record.exists
    outputs["fingerprint"] = report.fingerprints()
    outputs["exists"] = report.exists()
    outputs["artifact_result_key"] = ARTIFACT_RESULT_KEY
    return outputs


class GitHubOutputSink:
    """Writes step outputs to the ``$GITHUB_OUTPUT`` file.

    Parameters
    ----------
    output_path:
        The output file.  ``None`` (outside Actions) makes ``publish`` a
        logged no-op.
    """

    def __init__(self, output_path: Path | None) -> None:
        self._path = Path(output_path) if output_path else None

    @property
    def sink_name(self) -> str:
        return "github_output"

    def publish(self, report: CheckReport) -> None:
        outputs = build_outputs(report)
        for name, value in outputs.items():
            logger.info("Set output %s: %s", name, format_value(value))

        if self._path is None:
            logger.info("GITHUB_OUTPUT not set; step outputs not written")
            return

        text = "".join(format_output(name, value) for name, value in outputs.items())
        with self._path.open("a", encoding="utf-8") as fh:
            fh.write(text)
