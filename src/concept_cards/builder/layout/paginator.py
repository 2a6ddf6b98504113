"""
Module: builder.layout.paginator

Purpose:
    Place cards onto A4 pages in a centred grid.

Algorithm:
    For card i:
    1. i % cards_per_page == 0 closes the current page and opens a new one
    2. slot = i % cards_per_page; col = slot % columns; row = slot // columns
    3. Position from the symmetric margins, top-down, then flipped to
       bottom-up PDF coordinates

Dependencies:
    - builder.layout.models: CardPlacement, PagePlan
    - builder.layout.config: LayoutConfig

Used By:
    - builder.layout.engine: layout_deck()
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from concept_cards.core.models import Card, Deck

from .config import LayoutConfig
from .models import CardPlacement, PagePlan
from .units import transform_y

logger = logging.getLogger(__name__)


def grid_cell(index: int, config: LayoutConfig) -> Tuple[int, int, int]:
    """
    Grid cell for the card at deck position `index`.

    Returns:
        (slot, col, row) with row 0 at the top of the page

    Example:
        >>> grid_cell(9, LayoutConfig())
        (1, 1, 0)
    """
    slot = index % config.cards_per_page
    return slot, slot % config.columns, slot // config.columns


def place_card(card: Card, index: int, config: LayoutConfig) -> CardPlacement:
    """
    Compute the page position of a single card.

    Args:
        card: Card to place
        index: Position of the card in the deck
        config: Layout configuration

    Returns:
        CardPlacement in PDF points
    """
    slot, col, row = grid_cell(index, config)

    x = config.margin_x + col * (config.card_width + config.column_gap)
    top_offset = config.margin_y + row * (config.card_height + config.row_gap)
    y = transform_y(config.page_height, top_offset, config.card_height)

    return CardPlacement(
        card=card,
        index=index,
        slot=slot,
        col=col,
        row=row,
        x=x,
        y=y,
        width=config.card_width,
        height=config.card_height,
    )


def paginate(deck: Deck, config: LayoutConfig) -> tuple[PagePlan, ...]:
    """
    Arrange the deck's cards onto pages.

    Pages carry placements only; drawing instructions are added by
    the composer.

    Args:
        deck: Cards in print order
        config: Layout configuration

    Returns:
        ceil(len(deck) / cards_per_page) PagePlans, empty for an empty deck
    """
    pages: List[PagePlan] = []
    current: List[CardPlacement] = []

    for i, card in enumerate(deck):
        if i % config.cards_per_page == 0 and current:
            pages.append(PagePlan(index=len(pages), placements=tuple(current)))
            current = []
        current.append(place_card(card, i, config))

    if current:
        pages.append(PagePlan(index=len(pages), placements=tuple(current)))

    logger.info(f"Paginated {len(deck)} cards onto {len(pages)} pages")

    return tuple(pages)
