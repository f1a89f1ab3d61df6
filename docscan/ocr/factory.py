from docscan.config.settings import Settings
from docscan.ocr.base import BaseOcrClient
from docscan.ocr.example_adapter import ExampleOcrClient
from docscan.ocr.vision_adapter import VisionOcrClient


class OcrClientFactory:
    """Creates the configured OCR adapter."""

    PROVIDERS = ("example", "vision")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.lower()
        if provider == "vision":
            return VisionOcrClient()
        if provider == "example":
            return ExampleOcrClient(text=settings.example_ocr_text)
        raise ValueError(
            f"Unknown OCR provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
