"""
Module: builder.layout.typography

Purpose:
    Text measurement and title fitting for the accent strip.
    Uses ReportLab's standard font metrics, so the measured widths
    match what the PDF renderer draws.

Key Functions:
    - resolve_title(): Trim title, fall back to the default
    - text_width(): Measure a string
    - unprintable_characters(): Characters a standard font cannot encode
    - fit_title(): Shrink-to-fit loop for the rotated title
    - rotated_title_origin(): Baseline origin that centres the rotated title

Dependencies:
    - reportlab.pdfbase.pdfmetrics: Font metrics

Used By:
    - builder.layout.composer: Title drawing instructions
    - builder.layout.engine: Per-deck title fit
"""

from __future__ import annotations

import logging
from typing import Tuple

from reportlab.pdfbase import pdfmetrics

from concept_cards.core.concepts import DEFAULT_TITLE

from .config import LayoutConfig
from .models import TitleFit

logger = logging.getLogger(__name__)


def resolve_title(title: str) -> str:
    """
    Trim the title, substituting DEFAULT_TITLE when nothing is left.

    Length is not re-validated here; callers cap it.

    Example:
        >>> resolve_title("   ")
        'wiskunde'
    """
    return title.strip() or DEFAULT_TITLE


def text_width(text: str, font: str, size: float) -> float:
    """Width of `text` in points at `size` for a standard PDF font."""
    return pdfmetrics.stringWidth(text, font, size)


def unprintable_characters(text: str, font: str) -> str:
    """
    Characters of `text` that `font` and its substitution fonts cannot encode.

    ReportLab draws such characters as a black box instead of failing,
    so callers check text before it reaches the canvas.

    Returns:
        The distinct unprintable characters, in order of appearance

    Example:
        >>> unprintable_characters("café 日本", "Helvetica-Bold")
        '日本'
    """
    fonts = [pdfmetrics.getFont(font)]
    fonts.extend(fonts[0].substitutionFonts)
    return "".join(
        char for char in dict.fromkeys(text)
        if not any(_encodes(char, f.encName) for f in fonts)
    )


def _encodes(char: str, encoding: str) -> bool:
    try:
        char.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def fit_title(title: str, config: LayoutConfig) -> TitleFit:
    """
    Pick the largest title size that fits the strip.

    Starts at config.title_base_size and shrinks by title_size_step
    while the measured width exceeds config.title_max_width, stopping
    at title_min_size. At the floor the title is accepted as is, even
    if it still overflows.

    Args:
        title: Title text (already resolved)
        config: Layout configuration

    Returns:
        TitleFit with the chosen size and measured width

    Example:
        >>> fit_title("A", LayoutConfig()).font_size
        12.0
    """
    max_width = config.title_max_width
    font_size = config.title_base_size
    width = text_width(title, config.title_font, font_size)

    while width > max_width and font_size > config.title_min_size:
        font_size = max(config.title_min_size, font_size - config.title_size_step)
        width = text_width(title, config.title_font, font_size)

    fit = TitleFit(text=title, font_size=font_size, text_width=width, max_width=max_width)

    logger.debug(
        f"Fitted title {title!r} at {font_size}pt ({width:.1f}pt wide, max {max_width:.1f}pt)"
    )

    return fit


def rotated_title_origin(
    strip_x: float,
    card_y: float,
    fit: TitleFit,
    config: LayoutConfig,
) -> Tuple[float, float]:
    """
    Baseline origin for the title rotated 90 degrees (reading upwards).

    Horizontal: the glyphs of rotated text extend to the left of the
    baseline, so the baseline sits right of the strip centre by the
    approximate cap height divided by the optical adjustment (a little
    under half the cap height).

    Vertical: after rotation the text width is its vertical extent, so
    the run starts half its measured width below the card's middle.

    Args:
        strip_x: Left edge of the accent strip
        card_y: Bottom edge of the card
        fit: Fitted title
        config: Layout configuration

    Returns:
        (x, y) baseline origin in points
    """
    center_x = strip_x + config.strip_width / 2
    cap_height = fit.font_size * config.cap_height_ratio
    x = center_x + cap_height / config.title_optical_adjust
    y = card_y + config.card_height / 2 - fit.text_width / 2
    return x, y
