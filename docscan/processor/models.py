from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class UploadEvent:
    """Storage object-finalize event (subset of the event payload)."""

    bucket: str | None
    object_path: str | None
    content_type: str | None
    size_bytes: int | None

    @classmethod
    def from_storage_object(cls, data: dict[str, Any]) -> "UploadEvent":
        """Build an event from a storage object resource.

        ``size`` arrives as a decimal string; unparsable values become None.
        """
        return cls(
            bucket=data.get("bucket") or None,
            object_path=data.get("name") or None,
            content_type=data.get("contentType") or None,
            size_bytes=_parse_size(data.get("size")),
        )


def _parse_size(raw: object) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(str(raw))
    except ValueError:
        return None


@dataclass(frozen=True)
class PipelineContext:
    """Routing information derived once per invocation from the object path."""

    user_id: str
    folder_id: str
    original_file_name: str
    base_name: str

    @property
    def destination_path(self) -> str:
        return (
            f"users/{self.user_id}/folders/{self.folder_id}/documents/"
            f"{self.base_name}.pdf"
        )


@dataclass(frozen=True)
class SkipSignal:
    """Terminal, non-error signal: the event is not for this pipeline."""

    reason: str


@dataclass(frozen=True)
class ScratchResource:
    """A named temporary file owned by one pipeline invocation."""

    name: str
    path: Path


@dataclass(frozen=True)
class ImageSize:
    width: int
    height: int


@dataclass(frozen=True)
class ImagePlacement:
    """Where the image lands on the page, in PDF points (bottom-left origin)."""

    x: float
    y: float
    width: float
    height: float
    scale: float


@dataclass(frozen=True)
class AssembledDocument:
    """Rendered PDF bytes plus the scratch file they were written to."""

    pdf_bytes: bytes
    path: Path


@dataclass(frozen=True)
class DocumentRecord:
    """Metadata record persisted after a successful publish.

    ``created_at=None`` means the store assigns its own server timestamp.
    """

    name: str
    pdf_path: str
    pdf_url: str
    ocr_text: str
    original_image_name: str
    created_at: datetime | None = None

    def to_document(self) -> dict[str, object]:
        """Field mapping as stored in the metadata store."""
        return {
            "name": self.name,
            "pdfPath": self.pdf_path,
            "pdfUrl": self.pdf_url,
            "ocrText": self.ocr_text,
            "originalImageName": self.original_image_name,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class PipelineOutcome:
    """Terminal state of one invocation."""

    status: str
    reason: str = ""
    failure_kind: str | None = None
    error: Exception | None = None
    record: DocumentRecord | None = None
    pdf_path: str | None = None

    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"

    @property
    def succeeded(self) -> bool:
        return self.status == self.COMPLETED
