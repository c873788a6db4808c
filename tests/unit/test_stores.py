"""Tests for blob store implementations."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from azure.core.exceptions import ClientAuthenticationError, ServiceRequestError

from artifactcheck.errors import StoreUnavailableError
from artifactcheck.stores import BlobStore
from artifactcheck.stores.azure_blob import AzureBlobStore, account_url_for
from artifactcheck.stores.factory import build_store
from artifactcheck.stores.local import LocalBlobStore
from artifactcheck.stores.memory import InMemoryBlobStore


class TestProtocol:
    def test_implementations_satisfy_protocol(self, tmp_path: Path):
        assert isinstance(InMemoryBlobStore(), BlobStore)
        assert isinstance(LocalBlobStore(tmp_path), BlobStore)
        assert isinstance(AzureBlobStore(MagicMock()), BlobStore)


class TestInMemoryBlobStore:
    def test_exists_and_add(self):
        store = InMemoryBlobStore({"a/artifacts.zip"})
        assert store.exists("a/artifacts.zip") is True
        assert store.exists("b/artifacts.zip") is False
        store.add("b/artifacts.zip")
        assert store.exists("b/artifacts.zip") is True
        assert store.queries == ["a/artifacts.zip", "b/artifacts.zip", "b/artifacts.zip"]


class TestLocalBlobStore:
    def test_nested_blob(self, tmp_path: Path):
        blob = tmp_path / "org" / "repo" / "core_wheel_abc" / "artifacts.zip"
        blob.parent.mkdir(parents=True)
        blob.write_bytes(b"zip")
        store = LocalBlobStore(tmp_path)
        assert store.exists("org/repo/core_wheel_abc/artifacts.zip") is True
        assert store.exists("org/repo/core_wheel_zzz/artifacts.zip") is False

    def test_directory_is_not_a_blob(self, tmp_path: Path):
        (tmp_path / "org" / "artifacts.zip").mkdir(parents=True)
        assert LocalBlobStore(tmp_path).exists("org/artifacts.zip") is False

    def test_missing_base_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LocalBlobStore(tmp_path / "gone").exists("a/artifacts.zip")

    def test_rejects_escaping_names(self, tmp_path: Path):
        with pytest.raises(StoreUnavailableError):
            LocalBlobStore(tmp_path).exists("../outside/artifacts.zip")


def _container(exists=True, side_effect=None) -> MagicMock:
    container = MagicMock()
    container.account_name = "buildcache"
    container.container_name = "artifacts"
    blob_client = container.get_blob_client.return_value
    blob_client.exists.return_value = exists
    blob_client.exists.side_effect = side_effect
    return container


class TestAzureBlobStore:
    def test_account_url(self):
        assert account_url_for("buildcache") == "https://buildcache.blob.core.windows.net"

    def test_exists_queries_blob_client(self):
        container = _container(exists=True)
        store = AzureBlobStore(container)
        assert store.exists("org/repo/core_wheel_abc/artifacts.zip") is True
        container.get_blob_client.assert_called_once_with("org/repo/core_wheel_abc/artifacts.zip")

    def test_absent(self):
        assert AzureBlobStore(_container(exists=False)).exists("x/artifacts.zip") is False

    @pytest.mark.parametrize(
        "error",
        [ServiceRequestError("connection refused"), ClientAuthenticationError("denied")],
    )
    def test_azure_errors_become_store_unavailable(self, error):
        store = AzureBlobStore(_container(side_effect=error))
        with pytest.raises(StoreUnavailableError) as excinfo:
            store.exists("x/artifacts.zip")
        assert excinfo.value.blob_name == "x/artifacts.zip"
        assert excinfo.value.__cause__ is error

    def test_store_name(self):
        assert AzureBlobStore(_container()).store_name == "azure:buildcache/artifacts"

    def test_from_account_uses_default_credential(self):
        with patch("artifactcheck.stores.azure_blob.DefaultAzureCredential") as cred_cls, patch(
            "artifactcheck.stores.azure_blob.ContainerClient"
        ) as client_cls:
            AzureBlobStore.from_account("buildcache", "artifacts")
        client_cls.assert_called_once_with(
            account_url="https://buildcache.blob.core.windows.net",
            container_name="artifacts",
            credential=cred_cls.return_value,
        )

    def test_from_account_with_key(self):
        with patch("artifactcheck.stores.azure_blob.DefaultAzureCredential") as cred_cls, patch(
            "artifactcheck.stores.azure_blob.ContainerClient"
        ) as client_cls:
            AzureBlobStore.from_account("buildcache", "artifacts", account_key="a2V5")
        cred_cls.assert_not_called()
        credential = client_cls.call_args.kwargs["credential"]
        assert credential.account_name == "buildcache"

    def test_close_closes_client_and_credential(self):
        container = _container()
        credential = MagicMock()
        with AzureBlobStore(container, credential=credential):
            pass
        container.close.assert_called_once()
        credential.close.assert_called_once()


class TestBuildStore:
    def test_local_store_resolved_against_workspace(self, make_settings, workspace: Path):
        store = build_store(make_settings(), local_store=Path("cache"))
        assert isinstance(store, LocalBlobStore)
        assert store.store_name == f"local:{workspace / 'cache'}"

    def test_azure_store(self, make_settings):
        with patch("artifactcheck.stores.azure_blob.AzureBlobStore.from_account") as from_account:
            build_store(make_settings(account_key="a2V5"))
        from_account.assert_called_once_with("buildcache", "artifacts", account_key="a2V5")
