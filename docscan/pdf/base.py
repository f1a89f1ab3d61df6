import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from docscan.logging.logger import Log
from docscan.pdf.geometry import A4_PORTRAIT, fit_image
from docscan.processor.exceptions import AssembleError
from docscan.processor.models import ImagePlacement

JPEG = "jpeg"
PNG = "png"

EMBED_FORMATS: dict[str, str] = {
    "image/jpeg": JPEG,
    "image/jpg": JPEG,
    "image/png": PNG,
}


@dataclass(frozen=True)
class TextLayerStyle:
    """Invisible OCR text layer: present for search and selection only.

    Opacity and font size are intentionally degenerate; the text must be
    extractable but never visible.
    """

    x: float = 50.0
    top_margin: float = 50.0
    font_size: float = 0.1
    line_height: float = 12.0
    opacity: float = 0.0


def embed_format(content_type: str) -> str:
    """Embedding path for a content type; unknown types fall back to PNG."""
    fmt = EMBED_FORMATS.get(content_type.lower())
    if fmt is None:
        Log.warning(f"Unknown image type {content_type}, embedding as PNG")
        return PNG
    return fmt


class BasePdfAssembler(ABC):
    """Contract for all PDF assembly engines.

    Subclasses only render; image preparation, layout and error wrapping
    live here so every engine produces the same geometry.
    """

    engine: str = "base"

    def __init__(
        self,
        page_width: float = A4_PORTRAIT[0],
        page_height: float = A4_PORTRAIT[1],
        text_style: TextLayerStyle | None = None,
    ) -> None:
        self._page_width = page_width
        self._page_height = page_height
        self._text_style = text_style or TextLayerStyle()

    def assemble(self, image_path: Path, content_type: str, text: str) -> bytes:
        """Build a single-page PDF with the image and an invisible text layer.

        Args:
            image_path: Normalized image in the scratch area.
            content_type: Content type of the original upload; selects the
                JPEG or PNG embedding path.
            text: OCR text for the invisible layer, possibly empty.

        Returns:
            The serialized PDF.

        Raises:
            AssembleError: if embedding, layout or serialization fails.
        """
        fmt = embed_format(content_type)
        try:
            image_bytes, width, height = self._prepare_image(image_path, fmt)
            placement = fit_image(self._page_width, self._page_height, width, height)
            return self._render(image_bytes, placement, text)
        except AssembleError:
            raise
        except Exception as exc:
            raise AssembleError(f"{self.engine} assembly failed: {exc}") from exc

    def _prepare_image(self, image_path: Path, fmt: str) -> tuple[bytes, int, int]:
        raw = image_path.read_bytes()
        with Image.open(io.BytesIO(raw)) as image:
            width, height = image.size
            if fmt == JPEG:
                if image.format != "JPEG":
                    raise AssembleError(
                        f"Cannot embed {image.format} data as JPEG: {image_path.name}"
                    )
                return raw, width, height
            buf = io.BytesIO()
            image.save(buf, format="PNG")
            return buf.getvalue(), width, height

    @abstractmethod
    def _render(self, image_bytes: bytes, placement: ImagePlacement, text: str) -> bytes:
        """Draw the prepared image and text layer and serialize the PDF."""
