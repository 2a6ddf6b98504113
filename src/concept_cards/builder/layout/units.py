"""
Module: builder.layout.units

Purpose:
    Physical measurement helpers. Layout is specified in millimetres and
    emitted in PDF points; layout is computed top-down while PDF
    coordinates run bottom-up.

Key Functions:
    - mm_to_pt(): Millimetres to points
    - pt_to_mm(): Points to millimetres
    - transform_y(): Top-down offset to bottom-up PDF Y
"""

from __future__ import annotations

# Fixed conversion factor (1 mm = 2.83465 pt)
PT_PER_MM = 2.83465


def mm_to_pt(mm: float) -> float:
    """
    Convert millimetres to PDF points.

    Example:
        >>> round(mm_to_pt(10), 4)
        28.3465
    """
    return mm * PT_PER_MM


def pt_to_mm(pt: float) -> float:
    """Convert PDF points to millimetres."""
    return pt / PT_PER_MM


def transform_y(page_height_pt: float, top_pt: float, height_pt: float) -> float:
    """
    Convert a top-down offset to bottom-up PDF Y.

    Args:
        page_height_pt: Page height in points
        top_pt: Distance from page top to the element's top edge
        height_pt: Element height in points

    Returns:
        Y of the element's bottom edge, measured from the page bottom
    """
    return page_height_pt - top_pt - height_pt
