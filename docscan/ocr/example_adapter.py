"""Example OCR adapter.

Use this module as a reference when implementing new OCR providers.
Implement BaseOcrClient and register the provider in OcrClientFactory.
"""

from pathlib import Path

from docscan.ocr.base import BaseOcrClient
from docscan.processor.exceptions import OcrError


class ExampleOcrClient(BaseOcrClient):
    """Returns a fixed text for every readable image.

    No network calls. Useful for local development and tests.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    def detect_document_text(self, image_path: Path) -> str:
        if not image_path.is_file():
            raise OcrError(f"Image not found: {image_path}")
        return self._text
