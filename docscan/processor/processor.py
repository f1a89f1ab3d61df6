from pathlib import Path

from docscan.config.settings import Settings
from docscan.database.connection import init_pool
from docscan.imaging.normalizer import ImageNormalizer
from docscan.logging.logger import Log
from docscan.ocr.factory import OcrClientFactory
from docscan.pdf.factory import PdfAssemblerFactory
from docscan.processor.exceptions import PipelineError
from docscan.processor.models import PipelineOutcome, SkipSignal, UploadEvent
from docscan.processor.pipeline import PipelineState, PipelineStep, StepOutcome
from docscan.processor.scratch import scratch_area
from docscan.processor.steps import (
    AssembleDocumentStep,
    ExtractTextStep,
    FetchImageStep,
    NormalizeImageStep,
    RecordDocumentStep,
    UploadDocumentStep,
)
from docscan.processor.validator import EventValidator
from docscan.records.factory import RecordStoreFactory
from docscan.storage.factory import BlobStoreFactory


class Processor:
    """Orchestrates the ingestion pipeline for one uploaded image.

    Pipeline: validate -> fetch -> normalize -> ocr -> assemble -> publish -> record.
    Every step result is turned into a StepOutcome; the first failure ends the
    run. The scratch area is released on every exit path.
    """

    def __init__(
        self,
        validator: EventValidator,
        steps: list[PipelineStep],
        scratch_root: Path | None = None,
    ) -> None:
        self._validator = validator
        self._steps = steps
        self._scratch_root = scratch_root

    def process(self, event: UploadEvent) -> PipelineOutcome:
        """Run the full pipeline for an upload event.

        Returns the terminal outcome. Only unexpected (non-pipeline)
        exceptions propagate, after scratch cleanup.
        """
        routed = self._validator.validate(event)
        if isinstance(routed, SkipSignal):
            return PipelineOutcome(status=PipelineOutcome.SKIPPED, reason=routed.reason)

        Log.info(
            f"Processing image for user {routed.user_id}, folder {routed.folder_id}",
            object_path=event.object_path,
            content_type=event.content_type,
        )
        with scratch_area(self._scratch_root) as scratch:
            state = PipelineState(event=event, context=routed, scratch=scratch)
            for step in self._steps:
                outcome = self._run_step(step, state)
                if not outcome.ok:
                    return self._failed(outcome, state)

        Log.info("All processing steps completed", object_path=event.object_path)
        return PipelineOutcome(
            status=PipelineOutcome.COMPLETED,
            record=state.record,
            pdf_path=state.published_path,
        )

    def _run_step(self, step: PipelineStep, state: PipelineState) -> StepOutcome:
        try:
            step.run(state)
        except PipelineError as exc:
            return StepOutcome(step=step.name, error=exc)
        return StepOutcome(step=step.name)

    def _failed(self, outcome: StepOutcome, state: PipelineState) -> PipelineOutcome:
        Log.error(
            f"Pipeline aborted at step '{outcome.step}': {outcome.error}",
            stage=outcome.failure_kind,
            object_path=state.event.object_path,
        )
        return PipelineOutcome(
            status=PipelineOutcome.FAILED,
            reason=str(outcome.error),
            failure_kind=outcome.failure_kind,
            error=outcome.error,
            pdf_path=state.published_path,
        )


def build_steps(settings: Settings) -> list[PipelineStep]:
    """Create collaborator clients once and wire them into pipeline steps."""
    blob_store = BlobStoreFactory.create(settings)
    if settings.record_store.lower() == "postgres":
        init_pool(settings)
    return [
        FetchImageStep(blob_store),
        NormalizeImageStep(
            ImageNormalizer(
                max_width=settings.max_image_width,
                quality=settings.jpeg_quality,
            )
        ),
        ExtractTextStep(OcrClientFactory.create(settings)),
        AssembleDocumentStep(PdfAssemblerFactory.create(settings)),
        UploadDocumentStep(
            blob_store,
            url_host=settings.storage_url_host,
            metadata_max_chars=settings.ocr_metadata_max_chars,
        ),
        RecordDocumentStep(RecordStoreFactory.create(settings)),
    ]


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    scratch_root = Path(settings.scratch_dir) if settings.scratch_dir else None
    return Processor(
        validator=EventValidator(),
        steps=build_steps(settings),
        scratch_root=scratch_root,
    )
