from abc import ABC, abstractmethod
from dataclasses import dataclass

from docscan.processor.exceptions import PipelineError
from docscan.processor.models import (
    AssembledDocument,
    DocumentRecord,
    PipelineContext,
    ScratchResource,
    UploadEvent,
)
from docscan.processor.scratch import ScratchArea


@dataclass(slots=True)
class PipelineState:
    """Accumulates data as the upload moves through pipeline steps."""

    event: UploadEvent
    context: PipelineContext
    scratch: ScratchArea
    raw_image: ScratchResource | None = None
    normalized_image: ScratchResource | None = None
    pdf_file: ScratchResource | None = None
    ocr_text: str = ""
    document: AssembledDocument | None = None
    published_path: str | None = None
    pdf_url: str = ""
    record: DocumentRecord | None = None
    record_id: str | None = None

    @property
    def bucket(self) -> str:
        if self.event.bucket is None:
            raise ValueError("UploadEvent.bucket must be set for a validated event")
        return self.event.bucket

    @property
    def object_path(self) -> str:
        if self.event.object_path is None:
            raise ValueError("UploadEvent.object_path must be set for a validated event")
        return self.event.object_path


@dataclass(frozen=True)
class StepOutcome:
    """Tagged result of one step: success, or failure carrying its kind."""

    step: str
    error: PipelineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failure_kind(self) -> str | None:
        return None if self.error is None else self.error.kind


class PipelineStep(ABC):
    name: str = "step"

    @abstractmethod
    def run(self, state: PipelineState) -> PipelineState:
        raise NotImplementedError
