from pathlib import Path

from docscan.config.settings import Settings
from docscan.storage.base import BaseBlobStore
from docscan.storage.gcs_adapter import GcsBlobStore
from docscan.storage.local_adapter import LocalBlobStore


class BlobStoreFactory:
    """Creates the configured blob store."""

    STORES = ("gcs", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        store = settings.blob_store.lower()
        if store == "gcs":
            return GcsBlobStore()
        if store == "local":
            return LocalBlobStore(root=Path(settings.local_storage_root))
        raise ValueError(
            f"Unknown blob store '{store}'. Choose from: {list(cls.STORES)}"
        )
