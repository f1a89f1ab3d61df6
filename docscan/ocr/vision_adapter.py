from pathlib import Path
from typing import Any

from google.cloud import vision

from docscan.ocr.base import BaseOcrClient
from docscan.processor.exceptions import OcrError


class VisionOcrClient(BaseOcrClient):
    """Document text detection through Google Cloud Vision."""

    def __init__(self, client: Any | None = None) -> None:
        self._client = client if client is not None else vision.ImageAnnotatorClient()

    def detect_document_text(self, image_path: Path) -> str:
        try:
            content = image_path.read_bytes()
            response = self._client.document_text_detection(
                image=vision.Image(content=content)
            )
        except Exception as exc:
            raise OcrError(f"Vision document_text_detection failed: {exc}") from exc

        if response.error.message:
            raise OcrError(f"Vision API returned an error: {response.error.message}")
        annotation = response.full_text_annotation
        if not annotation or not annotation.text:
            return ""
        return str(annotation.text)
