"""
RU: Растровый рендеринг штрихкода GS1-128 (Pillow), PNG/base64/data URI
EN: Raster rendering of a GS1-128 module sequence (Pillow) with PNG/base64/data URI output

Requirements: Pillow
"""

from __future__ import annotations

import base64
import logging
from io import BytesIO
from typing import Final, Optional, Union

from PIL import Image, ImageDraw, ImageFont
from PIL.ImageFont import FreeTypeFont
from PIL.ImageFont import ImageFont as PILImageFont

from gs1barcode.barcodegen.exceptions import RenderError
from gs1barcode.config import MAX_IMAGE_HEIGHT, MAX_IMAGE_WIDTH
from gs1barcode.model.barcode import Barcode

logger = logging.getLogger(__name__)

__all__ = [
    "render_image",
    "render_bytes",
    "to_base64_png",
    "to_data_uri_png",
]

# Константы разметки подписи
CAPTION_VERTICAL_SPACING: Final[int] = 8  # Полный вертикальный интервал для подписи
CAPTION_TOP_MARGIN: Final[int] = 4  # Расстояние между штрихкодом и текстом подписи


def render_image(
    barcode: Barcode,
    width: int,
    height: int,
    foreground: str = "black",
    background: str = "white",
    caption: Optional[str] = None,
    caption_font_path: Optional[str] = None,
    caption_font_size: int = 14,
) -> Image.Image:
    """
    Draw the module sequence as full-height vertical bars.

    Every module gets ``width // module_count`` pixels; the leftover pixels
    are split evenly on both sides.

    Args:
        barcode: Encoded barcode.
        width: Image width in pixels.
        height: Bar height in pixels.
        foreground: Bar color.
        background: Space/quiet zone color.
        caption: Optional human readable text under the bars.
        caption_font_path: TrueType font for the caption.
        caption_font_size: Caption text size.

    Returns:
        PIL Image (RGB).

    Raises:
        RenderError: if width/height are out of range or the barcode needs
            more modules than there are pixels.

    Example:
        >>> img = render_image(encode("(10)123"), width=242, height=80)
        >>> img.size
        (242, 80)
    """
    if width <= 0 or width > MAX_IMAGE_WIDTH:
        raise RenderError(f"Width must be in 1..{MAX_IMAGE_WIDTH}, got {width}")
    if height <= 0 or height > MAX_IMAGE_HEIGHT:
        raise RenderError(f"Height must be in 1..{MAX_IMAGE_HEIGHT}, got {height}")

    count = barcode.module_count()
    bar_width = width // count if count else 0
    if bar_width < 1:
        logger.error("Barcode of %d modules does not fit in %dpx", count, width)
        raise RenderError(
            "Pixel per module < 1, barcode doesn't fit in given width",
            context={"width": width, "modules": count},
        )
    shift = (width - bar_width * count) // 2

    img = Image.new("RGB", (width, height), color=background)
    draw = ImageDraw.Draw(img)
    for pos, is_white in enumerate(barcode.modules):
        if is_white:
            continue
        x0 = pos * bar_width + shift
        draw.rectangle((x0, 0, x0 + bar_width - 1, height - 1), fill=foreground)

    logger.debug(
        "Rendered %d modules at %dpx/module (shift %dpx)", count, bar_width, shift
    )
    if caption:
        img = _add_caption(
            img, caption, caption_font_path, caption_font_size, foreground, background
        )
    return img


def _add_caption(
    img: Image.Image,
    caption: str,
    font_path: Optional[str] = None,
    font_size: int = 14,
    foreground: str = "black",
    background: str = "white",
) -> Image.Image:
    """Draw a caption below the image."""
    font: Union[FreeTypeFont, PILImageFont] = ImageFont.load_default()
    try:
        if font_path:
            font = ImageFont.truetype(font_path, font_size)
    except OSError as e:
        logger.warning("Failed to load caption font (%r): %r", font_path, e)
        font = ImageFont.load_default()
    txt_bbox = font.getbbox(caption)
    txt_width = txt_bbox[2] - txt_bbox[0]
    txt_height = txt_bbox[3] - txt_bbox[1]
    new_h = img.height + txt_height + CAPTION_VERTICAL_SPACING
    result = Image.new("RGB", (int(img.width), int(new_h)), background)
    result.paste(img, (0, 0))
    draw = ImageDraw.Draw(result)
    pos = ((img.width - txt_width) // 2, img.height + CAPTION_TOP_MARGIN)
    draw.text(pos, caption, font=font, fill=foreground)
    return result


def render_bytes(img: Image.Image, image_format: str = "PNG") -> bytes:
    """Encode a rendered image into a raster container (PNG by default)."""
    buf = BytesIO()
    try:
        img.save(buf, format=image_format.upper())
    except (KeyError, ValueError, OSError) as e:
        raise RenderError(
            f"Image encoding failed: {e}", context={"format": image_format}
        ) from e
    logger.debug("Output rendered as %s (%d bytes)", image_format, buf.getbuffer().nbytes)
    return buf.getvalue()


def to_base64_png(img: Image.Image) -> str:
    return base64.b64encode(render_bytes(img, "PNG")).decode("ascii")


def to_data_uri_png(img: Image.Image) -> str:
    return "data:image/png;base64," + to_base64_png(img)
