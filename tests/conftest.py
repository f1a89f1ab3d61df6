import io

import pytest
from PIL import Image, ImageDraw


def _render_image(size: tuple[int, int], fmt: str, mode: str = "RGB") -> bytes:
    image = Image.new(mode, size, "white")
    draw = ImageDraw.Draw(image)
    width, height = size
    draw.rectangle((width // 10, height // 10, width // 2, height // 3), fill="black")
    draw.line((0, height - 1, width - 1, 0), fill="gray", width=3)
    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def wide_jpeg_bytes() -> bytes:
    """A 2000x1500 photo-like JPEG, wider than the normalization cap."""
    return _render_image((2000, 1500), "JPEG")


@pytest.fixture()
def small_png_bytes() -> bytes:
    """A 400x300 RGBA PNG, narrower than the normalization cap."""
    return _render_image((400, 300), "PNG", mode="RGBA")


@pytest.fixture()
def gif_bytes() -> bytes:
    """A 600x800 palette GIF (portrait)."""
    return _render_image((600, 800), "GIF", mode="P")
