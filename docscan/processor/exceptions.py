from typing import ClassVar


class PipelineError(Exception):
    """Base exception for all fatal pipeline stage failures."""

    kind: ClassVar[str] = "pipeline"


class FetchError(PipelineError):
    """Raised when the source image cannot be downloaded into scratch."""

    kind = "fetch"


class NormalizeError(PipelineError):
    """Raised when the image cannot be decoded, resized or re-encoded."""

    kind = "normalize"


class OcrError(PipelineError):
    """Raised when the OCR service call fails (quota, auth, transport)."""

    kind = "ocr"


class AssembleError(PipelineError):
    """Raised when the PDF cannot be laid out or written."""

    kind = "assemble"


class PublishError(PipelineError):
    """Raised when the assembled PDF cannot be uploaded."""

    kind = "publish"


class RecordError(PipelineError):
    """Raised when the document metadata record cannot be written."""

    kind = "record"
