"""
Module: builder.output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page; its drawing instructions are
    replayed onto the canvas in order.

Key Functions:
    - render_to_pdf_bytes(): Render to an in-memory PDF
    - render_to_pdf(): Render and write to a file
    - write_pdf(): Write rendered bytes to a file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, instructions

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from reportlab.pdfgen import canvas

from concept_cards.builder.layout.models import (
    DrawLine,
    DrawRect,
    DrawText,
    Instruction,
    LayoutResult,
    PagePlan,
)

logger = logging.getLogger(__name__)

PDF_CREATOR = "Concept Cards"


def render_to_pdf_bytes(layout: LayoutResult) -> bytes:
    """
    Render layout result to PDF bytes.

    The document is assembled in memory and serialized in one step;
    if anything fails, nothing is returned.

    Args:
        layout: Layout result from layout_deck()

    Returns:
        Complete PDF document

    Example:
        >>> data = render_to_pdf_bytes(layout)
        >>> data[:5]
        b'%PDF-'
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating PDF without pages")

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(layout.page_width, layout.page_height))
    c.setTitle(layout.title.text)
    c.setCreator(PDF_CREATOR)

    for page in layout.pages:
        _render_page(c, page)
        c.showPage()

    c.save()

    data = buffer.getvalue()
    logger.info(f"Rendered {layout.page_count} pages ({len(data)} bytes)")
    return data


def render_to_pdf(layout: LayoutResult, output_path: Path) -> Path:
    """
    Render layout result to a PDF file.

    Args:
        layout: Layout result from layout_deck()
        output_path: Path to write PDF (parent directories are created)

    Returns:
        The written path

    Raises:
        OSError: If PDF cannot be written
    """
    return write_pdf(render_to_pdf_bytes(layout), output_path)


def write_pdf(data: bytes, output_path: Path) -> Path:
    """
    Write a rendered PDF, creating parent directories.

    Raises:
        OSError: If the file cannot be written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info(f"Wrote {output_path} ({len(data)} bytes)")
    return output_path


def _render_page(c: canvas.Canvas, page: PagePlan) -> None:
    """Replay a page's drawing instructions onto the canvas."""
    for instruction in page.instructions:
        _draw(c, instruction)


def _draw(c: canvas.Canvas, instruction: Instruction) -> None:
    """Draw a single instruction."""
    c.saveState()
    if isinstance(instruction, DrawRect):
        _draw_rect(c, instruction)
    elif isinstance(instruction, DrawText):
        _draw_text(c, instruction)
    elif isinstance(instruction, DrawLine):
        _draw_line(c, instruction)
    else:
        raise TypeError(f"Unknown drawing instruction: {instruction!r}")
    c.restoreState()


def _draw_rect(c: canvas.Canvas, rect: DrawRect) -> None:
    if rect.fill is not None:
        c.setFillColorRGB(*rect.fill)
    if rect.stroke is not None:
        c.setStrokeColorRGB(*rect.stroke)
        c.setLineWidth(rect.stroke_width)
    c.rect(
        rect.x,
        rect.y,
        rect.width,
        rect.height,
        stroke=1 if rect.stroke is not None else 0,
        fill=1 if rect.fill is not None else 0,
    )


def _draw_text(c: canvas.Canvas, text: DrawText) -> None:
    c.setFont(text.font, text.size)
    c.setFillColorRGB(*text.color)
    if text.rotation:
        # Rotate about the baseline origin
        c.translate(text.x, text.y)
        c.rotate(text.rotation)
        c.drawString(0, 0, text.text)
    else:
        c.drawString(text.x, text.y, text.text)


def _draw_line(c: canvas.Canvas, line: DrawLine) -> None:
    c.setStrokeColorRGB(*line.color)
    c.setLineWidth(line.thickness)
    c.line(line.x1, line.y1, line.x2, line.y2)
