"""
Module: builder.layout

Purpose:
    Page layout and typography for card sheets.
    Converts a deck into positioned A4 pages with drawing instructions.

Key Functions:
    - layout_deck(): Main entry point for layout
    - paginate(): Arrange cards onto pages
    - fit_title(): Shrink-to-fit the rotated title

Key Classes:
    - LayoutConfig: Configuration for page layout
    - CardPlacement: Card positioned on a page
    - PagePlan: Single page layout plan
    - LayoutResult: Complete layout

Dependencies:
    - reportlab: Font metrics
    - concept_cards.core.models: Card, Deck

Used By:
    - builder.controller: Main build controller
    - builder.output: Renderers
"""

from .config import LayoutConfig
from .models import (
    DrawRect,
    DrawText,
    DrawLine,
    TitleFit,
    CardPlacement,
    PagePlan,
    LayoutResult,
)
from .units import mm_to_pt, pt_to_mm, PT_PER_MM
from .typography import (
    fit_title,
    resolve_title,
    rotated_title_origin,
    text_width,
    unprintable_characters,
)
from .paginator import paginate, place_card, grid_cell
from .composer import compose_card, compose_page
from .engine import layout_deck

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "DrawRect",
    "DrawText",
    "DrawLine",
    "TitleFit",
    "CardPlacement",
    "PagePlan",
    "LayoutResult",
    # Units
    "mm_to_pt",
    "pt_to_mm",
    "PT_PER_MM",
    # Functions
    "fit_title",
    "resolve_title",
    "rotated_title_origin",
    "text_width",
    "unprintable_characters",
    "paginate",
    "place_card",
    "grid_cell",
    "compose_card",
    "compose_page",
    "layout_deck",
]
