"""Load the precomputed hash table from a directory of hash files.

Layout: {hashes_dir}/{filter_name}.hash, one hash per file.  The hashes
are produced by an earlier CI step; this module only reads them.
"""

from __future__ import annotations

import logging
from pathlib import Path

from artifactcheck.errors import ConfigError
from artifactcheck.models.hashes import HashTable

logger = logging.getLogger(__name__)

HASH_SUFFIX = ".hash"


def filter_name_from_path(path: Path) -> str:
    """``core.hash`` -> ``core``; files without the suffix keep their full name."""
    name = path.name
    if name.endswith(HASH_SUFFIX) and len(name) > len(HASH_SUFFIX):
        return name[: -len(HASH_SUFFIX)]
    return name


def load_hashes(hashes_dir: Path) -> HashTable:
    """Read every hash file under *hashes_dir* into a ``HashTable``.

    File contents are stripped of surrounding whitespace.  Hidden files and
    subdirectories are skipped.  Empty files are kept as empty entries so
    that a lookup for them reports the hash as missing.
    """
    hashes_dir = Path(hashes_dir)
    if not hashes_dir.is_dir():
        raise ConfigError(f"Hash directory not found: {hashes_dir}")

    entries: dict[str, str] = {}
    for path in sorted(hashes_dir.iterdir()):
        if path.name.startswith(".") or not path.is_file():
            continue
        filter_name = filter_name_from_path(path)
        try:
            value = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read hash file {path}: {exc}") from exc
        if not value:
            logger.warning("Hash file %s is empty", path)
        entries[filter_name] = value

    logger.info("Loaded %d hashes from %s", len(entries), hashes_dir)
    for filter_name in sorted(entries):
        logger.debug("hash %s = %s", filter_name, entries[filter_name])
    return HashTable(entries=entries)
