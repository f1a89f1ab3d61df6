import threading
from typing import Any

from docscan.logging.logger import Log
from docscan.processor.models import PipelineOutcome, UploadEvent
from docscan.processor.processor import Processor


class EventHandler:
    """Run one storage event through the processor and log the outcome.

    Invocations are fire-and-forget: nothing is raised back to the trigger.
    At most ``max_concurrent`` events are processed at the same time.
    """

    def __init__(self, processor: Processor, max_concurrent: int = 5) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self._processor = processor
        self._slots = threading.BoundedSemaphore(max_concurrent)

    def handle(self, data: dict[str, Any]) -> PipelineOutcome | None:
        """Process an object-finalize payload. Returns None on unexpected errors."""
        event = UploadEvent.from_storage_object(data)
        with self._slots:
            try:
                outcome = self._processor.process(event)
            except Exception as exc:
                Log.exception(
                    f"Unexpected error while processing upload: {exc}",
                    object_path=event.object_path,
                )
                return None

        if outcome.status == PipelineOutcome.COMPLETED:
            Log.info(f"Published {outcome.pdf_path}", object_path=event.object_path)
        elif outcome.status == PipelineOutcome.FAILED:
            Log.warning(
                f"Upload not processed ({outcome.failure_kind}): {outcome.reason}",
                object_path=event.object_path,
            )
        return outcome
