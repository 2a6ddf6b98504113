"""
Module: builder.output.preview

Purpose:
    Rasterise a laid-out page to a PIL image for on-screen preview.
    Replays the same drawing instructions as the PDF renderer, so the
    preview shows the real print geometry.

Key Functions:
    - render_preview(): Render one page to an RGB image

Dependencies:
    - PIL: Image drawing
    - builder.layout.models: LayoutResult, instructions

Used By:
    - concept_cards.cli: --preview option
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from concept_cards.builder.layout.models import (
    Color,
    DrawLine,
    DrawRect,
    DrawText,
    LayoutResult,
)

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_DPI = 100

# TrueType stand-ins for the standard PDF fonts
_FONT_CANDIDATES = {
    "Helvetica-Bold": (
        "arialbd.ttf",          # Arial Bold (Windows)
        "Arial Bold.ttf",       # Arial Bold (Mac)
        "LiberationSans-Bold.ttf",
        "DejaVuSans-Bold.ttf",
    ),
    "Helvetica": (
        "arial.ttf",
        "Arial.ttf",
        "LiberationSans-Regular.ttf",
        "DejaVuSans.ttf",
    ),
}


def render_preview(
    layout: LayoutResult,
    page_index: int = 0,
    *,
    dpi: int = DEFAULT_PREVIEW_DPI,
) -> Image.Image:
    """
    Render a single page of the layout to an image.

    Args:
        layout: Layout result from layout_deck()
        page_index: Page to render (0-indexed)
        dpi: Output resolution

    Returns:
        RGB image of the full page

    Raises:
        IndexError: If page_index is out of range

    Example:
        >>> img = render_preview(layout, dpi=72)
        >>> img.size
        (595, 842)
    """
    if not 0 <= page_index < layout.page_count:
        raise IndexError(f"Page {page_index} out of range (0-{layout.page_count - 1})")

    scale = dpi / 72.0
    size = (round(layout.page_width * scale), round(layout.page_height * scale))
    image = Image.new("RGB", size, color="white")
    draw = ImageDraw.Draw(image)

    def to_px(x: float, y: float) -> Tuple[float, float]:
        # PDF points (bottom-up) to image pixels (top-down)
        return x * scale, (layout.page_height - y) * scale

    for instruction in layout.pages[page_index].instructions:
        if isinstance(instruction, DrawRect):
            left, bottom = to_px(instruction.x, instruction.y)
            right, top = to_px(instruction.x + instruction.width, instruction.y + instruction.height)
            draw.rectangle(
                [left, top, right, bottom],
                fill=_rgb(instruction.fill) if instruction.fill is not None else None,
                outline=_rgb(instruction.stroke) if instruction.stroke is not None else None,
                width=_stroke_px(instruction.stroke_width, scale) if instruction.stroke is not None else 0,
            )
        elif isinstance(instruction, DrawLine):
            draw.line(
                [to_px(instruction.x1, instruction.y1), to_px(instruction.x2, instruction.y2)],
                fill=_rgb(instruction.color),
                width=_stroke_px(instruction.thickness, scale),
            )
        elif isinstance(instruction, DrawText):
            font = _load_font(instruction.font, max(1, round(instruction.size * scale)))
            origin = to_px(instruction.x, instruction.y)
            if instruction.rotation:
                _draw_rotated_text(image, origin, instruction, font)
            else:
                draw.text(origin, instruction.text, fill=_rgb(instruction.color), font=font, anchor="ls")

    logger.debug(f"Rendered preview of page {page_index} at {dpi} dpi")
    return image


def _draw_rotated_text(
    image: Image.Image,
    origin: Tuple[float, float],
    text: DrawText,
    font: ImageFont.FreeTypeFont,
) -> None:
    """
    Draw text rotated counter-clockwise about its baseline origin.

    The text is drawn onto a transparent layer, rotated, and pasted so
    that the layer's baseline origin lands on `origin`.
    """
    if text.rotation != 90:
        raise ValueError(f"Preview only supports 90 degree text rotation: {text.rotation}")

    ascent, descent = font.getmetrics()
    width = max(1, math.ceil(font.getlength(text.text)))
    layer = Image.new("RGBA", (width, ascent + descent), (0, 0, 0, 0))
    ImageDraw.Draw(layer).text((0, ascent), text.text, fill=_rgb(text.color), font=font, anchor="ls")

    rotated = layer.rotate(90, expand=True)
    # (0, ascent) on the layer maps to (ascent, width) after rotation
    offset = (round(origin[0] - ascent), round(origin[1] - width))
    image.paste(rotated, offset, rotated)


@lru_cache(maxsize=32)
def _load_font(name: str, size: int) -> ImageFont.FreeTypeFont:
    """
    Load a TrueType stand-in for a standard PDF font.

    Falls back to Pillow's bundled default font if none is installed.
    """
    for font_name in _FONT_CANDIDATES.get(name, _FONT_CANDIDATES["Helvetica"]):
        try:
            return ImageFont.truetype(font_name, size)
        except OSError:
            continue

    logger.warning(f"Could not load TrueType font for {name}, using default")
    return ImageFont.load_default(size=size)


def _rgb(color: Color) -> Tuple[int, int, int]:
    """Float RGB in [0, 1] to 8-bit RGB."""
    return tuple(round(channel * 255) for channel in color)


def _stroke_px(width_pt: float, scale: float) -> int:
    return max(1, round(width_pt * scale))
