"""Tests for fingerprint derivation."""

from __future__ import annotations

import pytest

from artifactcheck.core.fingerprint import (
    blob_name_for,
    compute_fingerprint,
    fingerprint_for,
)
from artifactcheck.errors import MissingHashError
from artifactcheck.models.artifacts import ArtifactSpec
from artifactcheck.models.hashes import HashTable


class TestComputeFingerprint:
    def test_format(self):
        assert compute_fingerprint("org/repo", "core", "wheel", "abc123") == (
            "org/repo/core_wheel_abc123"
        )

    def test_deterministic(self):
        args = ("org/repo", "core", "wheel", "abc123")
        assert compute_fingerprint(*args) == compute_fingerprint(*args)

    def test_values_are_not_escaped(self):
        fp = compute_fingerprint("o/r", "a_b", "c.d", "h")
        assert fp == "o/r/a_b_c.d_h"

    @pytest.mark.parametrize("field", [0, 1, 2, 3])
    def test_empty_component_rejected(self, field):
        args = ["org/repo", "core", "wheel", "abc123"]
        args[field] = ""
        with pytest.raises(ValueError):
            compute_fingerprint(*args)


class TestFingerprintFor:
    def test_uses_hash_table(self):
        hashes = HashTable(entries={"core": "abc123"})
        artifact = ArtifactSpec(filter_name="core", suffix="wheel")
        assert fingerprint_for(artifact, hashes, "org/repo") == "org/repo/core_wheel_abc123"

    def test_missing_hash_raises(self):
        hashes = HashTable(entries={"core": "abc123"})
        artifact = ArtifactSpec(filter_name="docs", suffix="site")
        with pytest.raises(MissingHashError) as excinfo:
            fingerprint_for(artifact, hashes, "org/repo")
        assert excinfo.value.filter_name == "docs"

    def test_empty_hash_counts_as_missing(self):
        hashes = HashTable(entries={"core": ""})
        artifact = ArtifactSpec(filter_name="core", suffix="wheel")
        with pytest.raises(MissingHashError):
            fingerprint_for(artifact, hashes, "org/repo")


def test_blob_name():
    assert blob_name_for("org/repo/core_wheel_abc123") == (
        "org/repo/core_wheel_abc123/artifacts.zip"
    )
