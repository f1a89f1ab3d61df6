from docscan.ocr.base import BaseOcrClient
from docscan.ocr.factory import OcrClientFactory

__all__ = ["BaseOcrClient", "OcrClientFactory"]
