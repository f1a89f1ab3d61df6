from docscan.processor.models import ImagePlacement

A4_PORTRAIT = (595.28, 841.89)


def fit_image(
    page_width: float,
    page_height: float,
    image_width: float,
    image_height: float,
) -> ImagePlacement:
    """Scale an image uniformly to fit the page and center it.

    ``scale = min(page_width / image_width, page_height / image_height)``.
    Coordinates use the PDF convention (origin at the bottom-left corner).
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Invalid image size {image_width}x{image_height}")
    scale = min(page_width / image_width, page_height / image_height)
    width = image_width * scale
    height = image_height * scale
    return ImagePlacement(
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
        scale=scale,
    )
