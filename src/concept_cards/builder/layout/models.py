"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses for drawing instructions, card placements
    and pages. All coordinates are PDF points, origin bottom-left.

Key Classes:
    - DrawRect, DrawText, DrawLine: Backend-neutral drawing instructions
    - TitleFit: Fitted title size and measurement
    - CardPlacement: Card positioned on a page
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - concept_cards.core.models: Card

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.layout.composer: Creates drawing instructions
    - builder.output: Consumes instructions
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from concept_cards.core.models import Card

Color = Tuple[float, float, float]


@dataclass(frozen=True)
class DrawRect:
    """
    Filled and/or stroked rectangle.

    Attributes:
        x, y: Bottom-left corner
        width, height: Size
        fill: Fill colour, None for no fill
        stroke: Border colour, None for no border
        stroke_width: Border width
    """

    x: float
    y: float
    width: float
    height: float
    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    stroke_width: float = 0.0


@dataclass(frozen=True)
class DrawText:
    """
    Single-line text run.

    (x, y) is the baseline origin. With rotation=90 the text reads
    bottom-to-top and (x, y) is the start of the vertical baseline.
    """

    text: str
    x: float
    y: float
    font: str
    size: float
    color: Color
    rotation: float = 0.0


@dataclass(frozen=True)
class DrawLine:
    """Straight line segment."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    thickness: float


Instruction = Union[DrawRect, DrawText, DrawLine]


@dataclass(frozen=True)
class TitleFit:
    """
    Result of fitting the title into the accent strip.

    Attributes:
        text: Resolved title text
        font_size: Chosen font size
        text_width: Measured width at font_size
        max_width: Span available to the title
    """

    text: str
    font_size: float
    text_width: float
    max_width: float

    @property
    def overflows(self) -> bool:
        """True if the title is still too long (only possible at the floor size)."""
        return self.text_width > self.max_width


@dataclass(frozen=True)
class CardPlacement:
    """
    A card positioned on a page.

    Attributes:
        card: The card to draw
        index: Position in the deck
        slot: Position on the page (0 .. cards_per_page-1)
        col, row: Grid cell (row 0 is the top of the page)
        x, y: Bottom-left corner in PDF points
        width, height: Card size in points

    Example:
        >>> placement.top - placement.y == placement.height
        True
    """

    card: Card
    index: int
    slot: int
    col: int
    row: int
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge X."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Top edge Y."""
        return self.y + self.height

    def overlaps(self, other: CardPlacement) -> bool:
        """Check if the two card bounding boxes share any area."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.top
            and other.y < self.top
        )


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Cards on this page, in deck order
        instructions: Drawing instructions, in paint order
    """

    index: int
    placements: tuple[CardPlacement, ...]
    instructions: tuple[Instruction, ...] = ()

    @property
    def card_count(self) -> int:
        """Number of cards on this page."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        """Check if page has no cards."""
        return len(self.placements) == 0


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans
        title: Fitted title shared by every card
        page_width, page_height: Page size in points
        warnings: Warning messages

    Example:
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    title: TitleFit
    page_width: float
    page_height: float
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_cards(self) -> int:
        """Total number of cards across all pages."""
        return sum(p.card_count for p in self.pages)
