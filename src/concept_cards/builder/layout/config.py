"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines card geometry, grid spacing, typography and colours.
    Measurements are stored in millimetres and exposed in points.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Card placement
    - builder.layout.composer: Drawing instructions
    - builder.layout.typography: Title fitting
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .units import mm_to_pt

Color = Tuple[float, float, float]

# A4 is the only supported page size
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for card sheet layout (immutable).

    Attributes ending in `_mm` are millimetres; font sizes and stroke
    widths are points. Colours are RGB floats in [0, 1].

    Example:
        >>> config = LayoutConfig()
        >>> config.cards_per_page
        8
        >>> round(config.margin_x, 2)
        28.35
    """

    # Grid
    columns: int = 2
    rows: int = 4

    # Card geometry
    card_width_mm: float = 90.0
    card_height_mm: float = 50.0
    column_gap_mm: float = 10.0
    row_gap_mm: float = 15.0
    strip_width_mm: float = 10.0

    # Title typography
    title_font: str = "Helvetica-Bold"
    title_base_size: float = 12.0
    title_min_size: float = 4.0
    title_size_step: float = 0.5
    title_padding_mm: float = 8.0
    cap_height_ratio: float = 0.7
    title_optical_adjust: float = 2.2  # empirical, tuned for Helvetica-Bold

    # Concept rows
    concepts_per_card: int = 5
    concept_font: str = "Helvetica-Bold"
    concept_font_size: float = 11.0
    content_padding_mm: float = 5.0
    first_line_offset_mm: float = 10.0
    line_pitch_mm: float = 8.0
    divider_offset_mm: float = 3.0
    divider_inset_mm: float = 5.0

    # Colours and strokes
    background_color: Color = (1.0, 1.0, 1.0)
    border_color: Color = (0.8, 0.8, 0.8)
    accent_color: Color = (0.98, 0.8, 0.08)
    title_color: Color = (0.0, 0.0, 0.0)
    concept_color: Color = (0.1, 0.1, 0.1)
    placeholder_color: Color = (0.8, 0.8, 0.8)
    divider_color: Color = (0.9, 0.9, 0.9)
    border_width: float = 1.0
    divider_thickness: float = 0.5

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"Grid must have positive size: {self.columns}x{self.rows}")
        if self.card_width_mm <= 0 or self.card_height_mm <= 0:
            raise ValueError("Card dimensions must be positive")
        if self.column_gap_mm < 0 or self.row_gap_mm < 0:
            raise ValueError("Gaps must be non-negative")
        if not 0 < self.strip_width_mm < self.card_width_mm:
            raise ValueError(f"strip_width_mm must be inside the card: {self.strip_width_mm}")
        if self.title_size_step <= 0:
            raise ValueError(f"title_size_step must be positive: {self.title_size_step}")
        if not 0 < self.title_min_size <= self.title_base_size:
            raise ValueError("title_min_size must be positive and <= title_base_size")
        if self.title_optical_adjust <= 0:
            raise ValueError("title_optical_adjust must be positive")
        if self.concepts_per_card <= 0:
            raise ValueError(f"concepts_per_card must be positive: {self.concepts_per_card}")
        if self.margin_x < 0:
            raise ValueError("Card grid exceeds page width")
        if self.margin_y < 0:
            raise ValueError("Card grid exceeds page height")

    # ─────────────────────────────────────────────────────────────────────
    # Derived dimensions (points)
    # ─────────────────────────────────────────────────────────────────────

    @property
    def page_width(self) -> float:
        return mm_to_pt(A4_WIDTH_MM)

    @property
    def page_height(self) -> float:
        return mm_to_pt(A4_HEIGHT_MM)

    @property
    def card_width(self) -> float:
        return mm_to_pt(self.card_width_mm)

    @property
    def card_height(self) -> float:
        return mm_to_pt(self.card_height_mm)

    @property
    def column_gap(self) -> float:
        return mm_to_pt(self.column_gap_mm)

    @property
    def row_gap(self) -> float:
        return mm_to_pt(self.row_gap_mm)

    @property
    def strip_width(self) -> float:
        return mm_to_pt(self.strip_width_mm)

    @property
    def cards_per_page(self) -> int:
        """Number of card slots on one page."""
        return self.columns * self.rows

    @property
    def content_width(self) -> float:
        """Width of the card grid block (cards + column gaps)."""
        return self.card_width * self.columns + self.column_gap * (self.columns - 1)

    @property
    def content_height(self) -> float:
        """Height of the card grid block (cards + row gaps)."""
        return self.card_height * self.rows + self.row_gap * (self.rows - 1)

    @property
    def margin_x(self) -> float:
        """Symmetric horizontal margin that centres the grid."""
        return (self.page_width - self.content_width) / 2

    @property
    def margin_y(self) -> float:
        """Symmetric vertical margin that centres the grid."""
        return (self.page_height - self.content_height) / 2

    @property
    def title_max_width(self) -> float:
        """Span available to the rotated title (card height minus padding)."""
        return self.card_height - mm_to_pt(self.title_padding_mm)
