import re
from pathlib import PurePosixPath

from docscan.logging.logger import Log
from docscan.processor.models import PipelineContext, SkipSignal, UploadEvent

RAW_IMAGE_PATH = re.compile(
    r"^users/(?P<user_id>[^/]+)/folders/(?P<folder_id>[^/]+)/raw_images/"
    r"(?:[^/]+/)*(?P<file_name>[^/]+)$"
)
EXPECTED_PATH_SHAPE = "users/{userId}/folders/{folderId}/raw_images/{fileName}"
IMAGE_CONTENT_PREFIX = "image/"


class EventValidator:
    """Gatekeeper between the storage trigger and the pipeline.

    Events that are not image uploads into a user's raw image folder are
    expected background noise and produce a SkipSignal instead of an error.
    """

    def validate(self, event: UploadEvent) -> PipelineContext | SkipSignal:
        """Derive the routing context for an event, or signal a skip.

        Performs no I/O.
        """
        if (
            not event.bucket
            or not event.object_path
            or not event.content_type
            or event.size_bytes is None
            or event.size_bytes <= 0
        ):
            return self._skip("missing bucket, path, content type or size", event)
        if not event.content_type.startswith(IMAGE_CONTENT_PREFIX):
            return self._skip(f"content type {event.content_type} is not an image", event)

        match = RAW_IMAGE_PATH.match(event.object_path)
        if match is None:
            Log.warning(
                f"Unexpected object path, expected {EXPECTED_PATH_SHAPE}",
                object_path=event.object_path,
            )
            return SkipSignal(reason=f"path does not match {EXPECTED_PATH_SHAPE}")

        file_name = match.group("file_name")
        return PipelineContext(
            user_id=match.group("user_id"),
            folder_id=match.group("folder_id"),
            original_file_name=file_name,
            base_name=PurePosixPath(file_name).stem,
        )

    def _skip(self, reason: str, event: UploadEvent) -> SkipSignal:
        Log.info(f"Not an image upload, skipping: {reason}", object_path=event.object_path)
        return SkipSignal(reason=reason)
