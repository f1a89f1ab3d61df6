from pathlib import Path
from typing import Any

from google.cloud import storage

from docscan.storage.base import BaseBlobStore


class GcsBlobStore(BaseBlobStore):
    """Blob storage on Google Cloud Storage (Firebase Storage buckets)."""

    def __init__(self, client: Any | None = None) -> None:
        self._client = client if client is not None else storage.Client()

    def download(self, bucket: str, path: str, destination: Path) -> None:
        blob = self._client.bucket(bucket).blob(path)
        blob.download_to_filename(str(destination))

    def upload(
        self,
        bucket: str,
        local_path: Path,
        destination: str,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        blob = self._client.bucket(bucket).blob(destination)
        blob.metadata = metadata
        blob.upload_from_filename(str(local_path), content_type=content_type)
