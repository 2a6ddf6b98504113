"""
Module: builder.layout.engine

Purpose:
    Main entry point of the page layout engine.
    Deck + title -> positioned pages with drawing instructions.

Key Functions:
    - layout_deck(): Paginate, fit the title, compose every page

Dependencies:
    - builder.layout.paginator, composer, typography

Used By:
    - builder.controller: Build pipeline
"""

from __future__ import annotations

import logging
from typing import List, Optional

from concept_cards.core.models import Deck

from .composer import compose_page
from .config import LayoutConfig
from .models import LayoutResult
from .paginator import paginate
from .typography import fit_title, resolve_title, unprintable_characters

logger = logging.getLogger(__name__)


def layout_deck(
    deck: Deck,
    title: str,
    config: Optional[LayoutConfig] = None,
) -> LayoutResult:
    """
    Lay out a deck onto A4 pages.

    Every geometry value is derived from (deck, title, config) on each
    call; nothing is cached between runs.

    Args:
        deck: Cards in print order
        title: Card title (trimmed; empty falls back to the default)
        config: Layout configuration (defaults to LayoutConfig())

    Returns:
        LayoutResult with one PagePlan per started page. An empty deck
        yields zero pages.

    Example:
        >>> result = layout_deck(deck, "wiskunde")
        >>> result.page_count
        2
    """
    config = config or LayoutConfig()
    warnings: List[str] = []

    fit = fit_title(resolve_title(title), config)
    if fit.overflows:
        warnings.append(
            f"Title {fit.text!r} does not fit the card strip even at {fit.font_size}pt"
        )

    missing = unprintable_characters(fit.text, config.title_font)
    if missing:
        warnings.append(f"Title contains characters {config.title_font} cannot print: {missing}")

    unprintable = [
        concept for concept in deck.concept_counts()
        if unprintable_characters(concept, config.concept_font)
    ]
    if unprintable:
        warnings.append(
            f"{len(unprintable)} concept(s) contain characters {config.concept_font} "
            f"cannot print: {', '.join(unprintable)}"
        )

    repeated = [card.id for card in deck if card.has_duplicates]
    if repeated:
        warnings.append(f"{len(repeated)} card(s) repeat a concept")

    for warning in warnings:
        logger.warning(warning)

    pages = tuple(compose_page(page, fit, config) for page in paginate(deck, config))

    if not pages:
        logger.warning("Empty deck, layout has no pages")

    return LayoutResult(
        pages=pages,
        title=fit,
        page_width=config.page_width,
        page_height=config.page_height,
        warnings=warnings,
    )
