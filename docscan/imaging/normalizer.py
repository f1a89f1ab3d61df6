from pathlib import Path

from PIL import Image, UnidentifiedImageError

from docscan.processor.exceptions import NormalizeError
from docscan.processor.models import ImageSize


def target_size(width: int, height: int, max_width: int) -> ImageSize:
    """Size capped at ``max_width`` with aspect ratio kept; never upscales."""
    if width <= max_width:
        return ImageSize(width=width, height=height)
    new_height = max(1, round(height * max_width / width))
    return ImageSize(width=max_width, height=new_height)


class ImageNormalizer:
    """Downsizes and re-encodes uploaded photos as JPEG with Pillow."""

    def __init__(self, max_width: int = 1000, quality: int = 80) -> None:
        if max_width < 1:
            raise ValueError("max_width must be positive")
        self._max_width = max_width
        self._quality = quality

    def normalize(self, source: Path, destination: Path) -> ImageSize:
        """Write the normalized image to ``destination`` and return its size.

        Raises:
            NormalizeError: if the source cannot be decoded or the output
                cannot be encoded.
        """
        if source == destination:
            raise NormalizeError("Normalized image must not overwrite its source")
        try:
            with Image.open(source) as image:
                image.load()
                size = target_size(image.width, image.height, self._max_width)
                if (size.width, size.height) != image.size:
                    resized = image.resize(
                        (size.width, size.height), Image.Resampling.LANCZOS
                    )
                else:
                    resized = image.copy()
            if resized.mode != "RGB":
                resized = resized.convert("RGB")
            resized.save(destination, format="JPEG", quality=self._quality)
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            ValueError,
        ) as exc:
            raise NormalizeError(f"Image normalization failed for {source.name}: {exc}") from exc
        return size
