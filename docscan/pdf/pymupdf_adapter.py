import pymupdf

from docscan.pdf.base import BasePdfAssembler
from docscan.processor.models import ImagePlacement


class PyMuPdfAssembler(BasePdfAssembler):
    """Assembles the PDF with PyMuPDF."""

    engine = "pymupdf"

    def _render(self, image_bytes: bytes, placement: ImagePlacement, text: str) -> bytes:
        style = self._text_style
        # PyMuPDF measures y from the top edge of the page.
        top = self._page_height - placement.y - placement.height
        rect = pymupdf.Rect(
            placement.x, top, placement.x + placement.width, top + placement.height
        )
        with pymupdf.open() as doc:  # type: ignore[no-untyped-call]
            page = doc.new_page(width=self._page_width, height=self._page_height)
            page.insert_image(rect, stream=image_bytes, keep_proportion=False)
            if text:
                page.insert_text(
                    pymupdf.Point(style.x, style.top_margin),
                    text,
                    fontname="helv",
                    fontsize=style.font_size,
                    lineheight=style.line_height / style.font_size,
                    color=(0, 0, 0),
                    fill_opacity=style.opacity,
                )
            return bytes(doc.tobytes(garbage=3, deflate=True))
