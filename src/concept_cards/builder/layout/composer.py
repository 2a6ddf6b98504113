"""
Module: builder.layout.composer

Purpose:
    Turn placed cards into drawing instructions.

    Paint order per card:
    1. Background rectangle (white, grey border)
    2. Accent strip along the left edge
    3. Title, rotated 90 degrees, inside the strip
    4. Concept rows, top to bottom
    5. Divider below every row except the last

Key Functions:
    - compose_card(): Instructions for one card
    - compose_page(): Instructions for a whole page

Dependencies:
    - builder.layout.models: Instructions, placements
    - builder.layout.typography: Title placement

Used By:
    - builder.layout.engine: layout_deck()
"""

from __future__ import annotations

import dataclasses
import logging
from typing import List

from .config import LayoutConfig
from .models import (
    CardPlacement,
    DrawLine,
    DrawRect,
    DrawText,
    Instruction,
    PagePlan,
    TitleFit,
)
from .typography import rotated_title_origin
from .units import mm_to_pt

logger = logging.getLogger(__name__)


def compose_card(
    placement: CardPlacement,
    fit: TitleFit,
    config: LayoutConfig,
) -> List[Instruction]:
    """
    Create the drawing instructions for a single card.

    Args:
        placement: Positioned card
        fit: Fitted title (shared by all cards)
        config: Layout configuration

    Returns:
        Instructions in paint order
    """
    x, y = placement.x, placement.y
    width, height = placement.width, placement.height

    instructions: List[Instruction] = [
        DrawRect(
            x=x,
            y=y,
            width=width,
            height=height,
            fill=config.background_color,
            stroke=config.border_color,
            stroke_width=config.border_width,
        ),
        DrawRect(
            x=x,
            y=y,
            width=config.strip_width,
            height=height,
            fill=config.accent_color,
        ),
    ]

    title_x, title_y = rotated_title_origin(x, y, fit, config)
    instructions.append(DrawText(
        text=fit.text,
        x=title_x,
        y=title_y,
        font=config.title_font,
        size=fit.font_size,
        color=config.title_color,
        rotation=90.0,
    ))

    content_x = x + config.strip_width + mm_to_pt(config.content_padding_mm)
    content_top = placement.top - mm_to_pt(config.first_line_offset_mm)
    line_pitch = mm_to_pt(config.line_pitch_mm)
    divider_end = placement.right - mm_to_pt(config.divider_inset_mm)
    rows = placement.card.padded(config.concepts_per_card)

    if len(placement.card.concepts) < config.concepts_per_card:
        logger.debug(f"Card {placement.card.id} padded to {config.concepts_per_card} rows")

    for idx, concept in enumerate(rows):
        text_y = content_top - idx * line_pitch
        is_padding = idx >= len(placement.card.concepts)
        instructions.append(DrawText(
            text=concept,
            x=content_x,
            y=text_y,
            font=config.concept_font,
            size=config.concept_font_size,
            color=config.placeholder_color if is_padding else config.concept_color,
        ))

        if idx < len(rows) - 1:
            line_y = text_y - mm_to_pt(config.divider_offset_mm)
            instructions.append(DrawLine(
                x1=content_x,
                y1=line_y,
                x2=divider_end,
                y2=line_y,
                color=config.divider_color,
                thickness=config.divider_thickness,
            ))

    return instructions


def compose_page(page: PagePlan, fit: TitleFit, config: LayoutConfig) -> PagePlan:
    """
    Return a copy of `page` carrying the instructions for all its cards.
    """
    instructions: List[Instruction] = []
    for placement in page.placements:
        instructions.extend(compose_card(placement, fit, config))
    return dataclasses.replace(page, instructions=tuple(instructions))
