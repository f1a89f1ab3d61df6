import io

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from docscan.pdf.base import BasePdfAssembler
from docscan.processor.models import ImagePlacement


class ReportLabAssembler(BasePdfAssembler):
    """Assembles the PDF with ReportLab."""

    engine = "reportlab"

    def _render(self, image_bytes: bytes, placement: ImagePlacement, text: str) -> bytes:
        style = self._text_style
        buf = io.BytesIO()
        c = canvas.Canvas(
            buf, pagesize=(self._page_width, self._page_height), invariant=1
        )
        c.drawImage(
            ImageReader(io.BytesIO(image_bytes)),
            placement.x,
            placement.y,
            width=placement.width,
            height=placement.height,
        )
        if text:
            c.saveState()
            c.setFillColorRGB(0, 0, 0)
            c.setFillAlpha(style.opacity)
            text_object = c.beginText(style.x, self._page_height - style.top_margin)
            text_object.setFont("Helvetica", style.font_size, leading=style.line_height)
            text_object.textLines(text, trim=0)
            c.drawText(text_object)
            c.restoreState()
        c.showPage()
        c.save()
        return buf.getvalue()
