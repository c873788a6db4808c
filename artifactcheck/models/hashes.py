"""Hash table model with explicit lookup results.

Looking up a filter never yields a bare ``None``: callers get a
``HashLookup`` and must either check ``found`` or call ``unwrap()``,
which raises ``MissingHashError`` for an absent filter.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from artifactcheck.errors import MissingHashError


class HashLookup(BaseModel):
    """Result of looking up one filter in a ``HashTable``."""

    model_config = ConfigDict(frozen=True)

    filter_name: str
    value: str | None = None

    @property
    def found(self) -> bool:
        return bool(self.value)

    def unwrap(self) -> str:
        """Return the hash, or raise ``MissingHashError`` if there is none."""
        if not self.value:
            raise MissingHashError(self.filter_name)
        return self.value


class HashTable(BaseModel):
    """Read-only mapping of filter name to content hash."""

    model_config = ConfigDict(frozen=True)

    entries: dict[str, str] = {}

    def lookup(self, filter_name: str) -> HashLookup:
        return HashLookup(filter_name=filter_name, value=self.entries.get(filter_name))

    def filter_names(self) -> list[str]:
        return sorted(self.entries)

    def __contains__(self, filter_name: object) -> bool:
        return bool(self.entries.get(filter_name))  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.entries)
