from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcrClient(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def detect_document_text(self, image_path: Path) -> str:
        """Run dense document text detection on an image file.

        Args:
            image_path: Normalized image in the scratch area.

        Returns:
            The full recognized text, or an empty string when the image
            contains no text.

        Raises:
            OcrError: if the OCR service call fails.
        """
