from docscan.imaging.normalizer import ImageNormalizer
from docscan.logging.logger import Log
from docscan.ocr.base import BaseOcrClient
from docscan.pdf.base import BasePdfAssembler
from docscan.processor.exceptions import (
    AssembleError,
    FetchError,
    PublishError,
    RecordError,
)
from docscan.processor.models import AssembledDocument, DocumentRecord
from docscan.processor.pipeline import PipelineState, PipelineStep
from docscan.records.base import BaseRecordStore
from docscan.storage.base import BaseBlobStore
from docscan.storage.urls import public_url

PDF_CONTENT_TYPE = "application/pdf"
OCR_LOG_EXCERPT_CHARS = 200


class FetchImageStep(PipelineStep):
    name = "fetch"

    def __init__(self, blob_store: BaseBlobStore) -> None:
        self._blob_store = blob_store

    def run(self, state: PipelineState) -> PipelineState:
        raw_image = state.scratch.allocate(state.context.original_file_name)
        state.raw_image = raw_image
        try:
            self._blob_store.download(state.bucket, state.object_path, raw_image.path)
        except Exception as exc:
            state.scratch.release(raw_image)
            raise FetchError(
                f"Download of gs://{state.bucket}/{state.object_path} failed: {exc}"
            ) from exc
        Log.info(f"Downloaded image to {raw_image.path}", object_path=state.object_path)
        return state


class NormalizeImageStep(PipelineStep):
    name = "normalize"

    def __init__(self, normalizer: ImageNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, state: PipelineState) -> PipelineState:
        if state.raw_image is None:
            raise ValueError("PipelineState.raw_image must be set before normalization")
        normalized = state.scratch.allocate(f"processed_{state.context.original_file_name}")
        state.normalized_image = normalized
        try:
            size = self._normalizer.normalize(state.raw_image.path, normalized.path)
        except Exception:
            state.scratch.release(state.raw_image)
            state.scratch.release(normalized)
            raise
        Log.info(
            f"Normalized image to {size.width}x{size.height}",
            object_path=state.object_path,
        )
        return state


class ExtractTextStep(PipelineStep):
    name = "ocr"

    def __init__(self, ocr_client: BaseOcrClient) -> None:
        self._ocr_client = ocr_client

    def run(self, state: PipelineState) -> PipelineState:
        if state.normalized_image is None:
            raise ValueError("PipelineState.normalized_image must be set before OCR")
        try:
            text = self._ocr_client.detect_document_text(state.normalized_image.path)
        except Exception:
            state.scratch.release(state.raw_image)
            state.scratch.release(state.normalized_image)
            raise
        state.ocr_text = text
        if text:
            Log.info(f"Recognized {len(text)} chars", object_path=state.object_path)
            Log.debug(f"Recognized text (excerpt): {text[:OCR_LOG_EXCERPT_CHARS]}...")
        else:
            Log.info("No text found in image", object_path=state.object_path)
        return state


class AssembleDocumentStep(PipelineStep):
    name = "assemble"

    def __init__(self, assembler: BasePdfAssembler) -> None:
        self._assembler = assembler

    def run(self, state: PipelineState) -> PipelineState:
        if state.normalized_image is None:
            raise ValueError("PipelineState.normalized_image must be set before assembly")
        content_type = state.event.content_type or ""
        try:
            pdf_bytes = self._assembler.assemble(
                state.normalized_image.path, content_type, state.ocr_text
            )
        finally:
            # An upload may itself be named {base}.pdf.
            state.scratch.release(state.raw_image)
            state.scratch.release(state.normalized_image)
            Log.debug("Deleted scratch images", object_path=state.object_path)
        try:
            pdf_file = state.scratch.allocate(f"{state.context.base_name}.pdf")
            state.pdf_file = pdf_file
            pdf_file.path.write_bytes(pdf_bytes)
        except (ValueError, OSError) as exc:
            state.scratch.release(state.pdf_file)
            raise AssembleError(f"Could not write scratch PDF: {exc}") from exc
        state.document = AssembledDocument(pdf_bytes=pdf_bytes, path=pdf_file.path)
        Log.info(
            f"Assembled PDF ({len(pdf_bytes)} bytes) at {pdf_file.path}",
            object_path=state.object_path,
        )
        return state


class UploadDocumentStep(PipelineStep):
    name = "publish"

    def __init__(
        self,
        blob_store: BaseBlobStore,
        url_host: str,
        metadata_max_chars: int = 1000,
    ) -> None:
        self._blob_store = blob_store
        self._url_host = url_host
        self._metadata_max_chars = metadata_max_chars

    def run(self, state: PipelineState) -> PipelineState:
        if state.document is None or state.pdf_file is None:
            raise ValueError("PipelineState.document must be set before upload")
        destination = state.context.destination_path
        metadata = {
            "ocrText": state.ocr_text[: self._metadata_max_chars],
            "originalFileName": state.context.original_file_name,
        }
        try:
            self._blob_store.upload(
                state.bucket,
                state.document.path,
                destination,
                PDF_CONTENT_TYPE,
                metadata,
            )
        except Exception as exc:
            raise PublishError(f"Upload to {destination} failed: {exc}") from exc
        finally:
            state.scratch.release(state.pdf_file)
        state.published_path = destination
        state.pdf_url = public_url(self._url_host, state.bucket, destination)
        Log.info(f"Uploaded PDF to {destination}", object_path=state.object_path)
        return state


class RecordDocumentStep(PipelineStep):
    name = "record"

    def __init__(self, record_store: BaseRecordStore) -> None:
        self._record_store = record_store

    def run(self, state: PipelineState) -> PipelineState:
        if state.published_path is None:
            raise ValueError("PipelineState.published_path must be set before recording")
        context = state.context
        record = DocumentRecord(
            name=context.base_name,
            pdf_path=state.published_path,
            pdf_url=state.pdf_url,
            ocr_text=state.ocr_text,
            original_image_name=context.original_file_name,
        )
        try:
            state.record_id = self._record_store.add(context.user_id, context.folder_id, record)
        except Exception as exc:
            Log.error(
                "Metadata record not written; published PDF has no record",
                orphaned_pdf=state.published_path,
            )
            if isinstance(exc, RecordError):
                raise
            raise RecordError(f"Metadata record write failed: {exc}") from exc
        state.record = record
        Log.info(
            f"Saved document record {state.record_id}",
            object_path=state.object_path,
        )
        return state
