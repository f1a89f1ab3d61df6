from abc import ABC, abstractmethod
from pathlib import Path


class BaseBlobStore(ABC):
    """Contract for blob storage adapters.

    Adapters raise their library's own errors; pipeline steps translate them
    into FetchError or PublishError depending on which side failed.
    """

    @abstractmethod
    def download(self, bucket: str, path: str, destination: Path) -> None:
        """Copy the object at ``bucket/path`` to the local ``destination`` file."""

    @abstractmethod
    def upload(
        self,
        bucket: str,
        local_path: Path,
        destination: str,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """Store ``local_path`` as ``bucket/destination`` with custom metadata."""
