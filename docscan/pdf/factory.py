from docscan.config.settings import Settings
from docscan.pdf.base import BasePdfAssembler
from docscan.pdf.pymupdf_adapter import PyMuPdfAssembler
from docscan.pdf.reportlab_adapter import ReportLabAssembler


class PdfAssemblerFactory:
    """Creates the correct PDF assembler based on settings."""

    ADAPTERS: dict[str, type[BasePdfAssembler]] = {
        "pymupdf": PyMuPdfAssembler,
        "reportlab": ReportLabAssembler,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfAssembler:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(
            page_width=settings.page_width,
            page_height=settings.page_height,
        )
