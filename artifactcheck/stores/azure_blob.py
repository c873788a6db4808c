"""Azure Blob Storage store.

Account URL: https://{account}.blob.core.windows.net.  Authenticates with
``DefaultAzureCredential`` (environment, workload identity, managed
identity, Azure CLI, ...) unless a shared account key is configured.
"""

from __future__ import annotations

import logging
from typing import Any

from azure.core.credentials import AzureNamedKeyCredential
from azure.core.exceptions import AzureError
from azure.identity import DefaultAzureCredential
from azure.storage.blob import ContainerClient

from artifactcheck.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def account_url_for(account_name: str) -> str:
    return f"https://{account_name}.blob.core.windows.net"


class AzureBlobStore:
    """Existence checks against one Azure Blob Storage container.

    Parameters
    ----------
    container_client:
        A configured ``ContainerClient``.  Use ``from_account`` to build
        one from an account name and container.
    """

    def __init__(self, container_client: ContainerClient, *, credential: Any = None) -> None:
        self._container = container_client
        self._credential = credential

    @classmethod
    def from_account(
        cls,
        account_name: str,
        container: str,
        *,
        account_key: str = "",
        credential: Any = None,
    ) -> AzureBlobStore:
        """Connect to *container* in storage account *account_name*."""
        if credential is None:
            if account_key:
                credential = AzureNamedKeyCredential(account_name, account_key)
            else:
                credential = DefaultAzureCredential()
        client = ContainerClient(
            account_url=account_url_for(account_name),
            container_name=container,
            credential=credential,
        )
        logger.debug("Azure store: %s/%s", account_url_for(account_name), container)
        return cls(client, credential=credential)

    @property
    def store_name(self) -> str:
        return f"azure:{self._container.account_name}/{self._container.container_name}"

    def exists(self, blob_name: str) -> bool:
        try:
            return bool(self._container.get_blob_client(blob_name).exists())
        except AzureError as exc:
            raise StoreUnavailableError(
                blob_name, f"{self.store_name}: cannot check {blob_name}: {exc}"
            ) from exc

    def close(self) -> None:
        self._container.close()
        close = getattr(self._credential, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> AzureBlobStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
