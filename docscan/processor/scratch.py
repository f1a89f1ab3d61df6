import shutil
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path, PurePath

from docscan.logging.logger import Log
from docscan.processor.models import ScratchResource


class ScratchArea:
    """Per-invocation temporary directory tracking the files created in it."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self._resources: dict[str, ScratchResource] = {}

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def live_resources(self) -> list[ScratchResource]:
        return list(self._resources.values())

    def allocate(self, name: str) -> ScratchResource:
        """Reserve a scratch file path. The file itself is created by the caller."""
        if name in self._resources:
            raise ValueError(f"Scratch resource '{name}' already allocated")
        if not name or PurePath(name).name != name:
            raise ValueError(f"Invalid scratch resource name '{name}'")
        resource = ScratchResource(name=name, path=self._directory / name)
        self._resources[name] = resource
        return resource

    def release(self, resource: ScratchResource | None) -> None:
        """Delete a scratch file. Idempotent and never raises."""
        if resource is None or self._resources.pop(resource.name, None) is None:
            return
        try:
            resource.path.unlink(missing_ok=True)
            Log.debug(f"Deleted scratch file {resource.path}")
        except OSError as exc:
            Log.warning(f"Could not delete scratch file {resource.path}: {exc}")

    def release_all(self) -> None:
        for resource in self.live_resources:
            self.release(resource)


@contextmanager
def scratch_area(root: str | Path | None = None) -> Generator[ScratchArea, None, None]:
    """Yield a fresh scratch area; every resource is released on exit."""
    directory = Path(tempfile.mkdtemp(prefix="docscan-", dir=root))
    area = ScratchArea(directory)
    try:
        yield area
    finally:
        area.release_all()
        shutil.rmtree(directory, ignore_errors=True)
