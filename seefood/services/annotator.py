"""Banner Rendering

Draws the verdict banner onto the image with Pillow so the same result
can be shown in a window or written to disk.
"""

import io
import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont, ImageOps

from ..exceptions import ImageDecodeError
from .classifier import Verdict

logger = logging.getLogger(__name__)

BANNER_FONT = "DejaVuSans-Bold.ttf"
TEXT_COLOR = "white"


def load_image(content: bytes) -> Image.Image:
    """Decode image bytes into an upright RGB image.

    Args:
        content: Raw image content.

    Returns:
        Decoded image with EXIF orientation applied.

    Raises:
        ImageDecodeError: If the image exceeds Pillow's pixel limit.
        OSError: If the bytes are not a readable image.
    """
    try:
        with Image.open(io.BytesIO(content)) as img:
            img = ImageOps.exif_transpose(img)
            return img.convert("RGB")
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(f"Image is too large to display: {e}") from e


def load_font(size: int) -> ImageFont.ImageFont:
    """Load a bold font at the given size, or Pillow's default font."""
    try:
        return ImageFont.truetype(BANNER_FONT, size)
    except OSError:
        logger.debug(f"{BANNER_FONT} not available, using default font")
        return ImageFont.load_default(size=size)


def annotate(image: Image.Image, verdict: Verdict, font_size: int = 36) -> Image.Image:
    """Return a copy of the image with one verdict banner drawn on it.

    The banner spans the full width, at the top for a hot dog and at the
    bottom otherwise.

    Args:
        image: Source image. Not modified.
        verdict: Verdict to display.
        font_size: Banner text size in pixels.

    Returns:
        Annotated RGB image.
    """
    annotated = image.convert("RGB")
    draw = ImageDraw.Draw(annotated)
    font = load_font(font_size)

    left, top, right, bottom = draw.textbbox((0, 0), verdict.text, font=font)
    text_width = right - left
    text_height = bottom - top
    padding = max(font_size // 4, 2)
    banner_height = min(text_height + 2 * padding, annotated.height)

    if verdict.position == "top":
        y0 = 0
    else:
        y0 = annotated.height - banner_height

    draw.rectangle(
        [0, y0, annotated.width - 1, y0 + banner_height - 1],
        fill=verdict.color,
    )
    draw.text(
        ((annotated.width - text_width) // 2 - left, y0 + padding - top),
        verdict.text,
        fill=TEXT_COLOR,
        font=font,
    )
    return annotated


def save_annotated(image: Image.Image, output_path: Path) -> Path:
    """Save an annotated image, creating parent folders as needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path)
    logger.info(f"Saved annotated image: {output_path}")
    return output_path
