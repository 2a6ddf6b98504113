"""
Module: builder

Purpose:
    Card sheet building pipeline: concepts → deck → A4 page layout → PDF.

Key Functions:
    - build_deck(): Spread concepts across cards
    - layout_deck(): Position cards and emit drawing instructions
    - build_sheet(): Main entry point for sheet generation

Key Classes:
    - BuilderConfig: Configuration for building
    - LayoutConfig: Configuration for page layout

Dependencies:
    - reportlab: PDF generation and font metrics
    - PIL: Preview images
    - concept_cards.core.models: Card, Deck

Used By:
    - concept_cards.cli: Command line front end
"""

from .config import BuilderConfig
from .deck import build_deck, DeckError
from .layout import LayoutConfig, LayoutResult, layout_deck
from .controller import build_sheet, generate_deck, BuildResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    "LayoutConfig",
    # Deck
    "build_deck",
    "DeckError",
    # Layout
    "layout_deck",
    "LayoutResult",
    # Controller
    "build_sheet",
    "generate_deck",
    "BuildResult",
    "BuildError",
]
