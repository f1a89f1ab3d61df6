import threading
from typing import Any

from docscan.config.settings import Settings
from docscan.logging.logger import Log
from docscan.processor.processor import build_processor
from docscan.worker.event_handler import EventHandler

_handler: EventHandler | None = None
_handler_lock = threading.Lock()


def get_handler() -> EventHandler:
    """Build the handler and its service clients once per process."""
    global _handler  # noqa: PLW0603
    with _handler_lock:
        if _handler is None:
            settings = Settings()
            Log.configure(settings.log_level)
            Log.info(
                f"Starting docscan worker (env={settings.app_env}, "
                f"region={settings.region}, max_instances={settings.max_instances})"
            )
            _handler = EventHandler(
                build_processor(settings), max_concurrent=settings.max_instances
            )
    return _handler


def handle_object_finalized(data: dict[str, Any]) -> None:
    """Entry point for storage object-finalize events."""
    get_handler().handle(data)
