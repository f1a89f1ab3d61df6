import json
import shutil
from pathlib import Path

from docscan.storage.base import BaseBlobStore


class LocalBlobStore(BaseBlobStore):
    """Filesystem-backed blob store: objects live at {root}/{bucket}/{path}.

    Custom metadata is written next to each uploaded object as a
    ``.metadata.json`` sidecar.
    """

    ROOT = Path("/app/storage")
    METADATA_SUFFIX = ".metadata.json"

    def __init__(self, root: Path | None = None) -> None:
        self._root = (root if root is not None else self.ROOT).resolve()

    def object_path(self, bucket: str, path: str) -> Path:
        """Resolve an object key to a file under the root.

        Raises:
            ValueError: if the key escapes the root directory.
        """
        resolved = (self._root / bucket / path).resolve()
        if not resolved.is_relative_to(self._root / bucket):
            raise ValueError(f"Object path escapes bucket root: {bucket}/{path}")
        return resolved

    def metadata_path(self, bucket: str, path: str) -> Path:
        target = self.object_path(bucket, path)
        return target.with_name(target.name + self.METADATA_SUFFIX)

    def download(self, bucket: str, path: str, destination: Path) -> None:
        source = self.object_path(bucket, path)
        if not source.is_file():
            raise FileNotFoundError(f"Object not found: {bucket}/{path}")
        shutil.copyfile(source, destination)

    def upload(
        self,
        bucket: str,
        local_path: Path,
        destination: str,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        target = self.object_path(bucket, destination)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(local_path, target)
        self.metadata_path(bucket, destination).write_text(
            json.dumps({"contentType": content_type, "metadata": metadata}),
            encoding="utf-8",
        )
