"""JSON result file.

Body: ``{artifact_name: {"fingerprint": ..., "exists": ...}}`` in manifest
order, indented for reading in the uploaded workflow artifact.  The file
is written to a temporary sibling and renamed into place.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from artifactcheck.models.artifacts import CheckReport

logger = logging.getLogger(__name__)


class JsonReportSink:
    """Writes the result document to *output_path*."""

    def __init__(self, output_path: Path) -> None:
        self._path = Path(output_path)

    @property
    def sink_name(self) -> str:
        return "json_report"

    @property
    def path(self) -> Path:
        return self._path

    def publish(self, report: CheckReport) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(report.result_document(), indent=2)

        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", self._path)

    def read(self) -> dict:
        """Read back the written result document."""
        return json.loads(self._path.read_text(encoding="utf-8"))
