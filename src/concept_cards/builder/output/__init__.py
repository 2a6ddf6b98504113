"""
Module: builder.output

Purpose:
    PDF rendering and preview output.
    Converts LayoutResult to PDF bytes/files using ReportLab and to
    preview images using Pillow.

Key Functions:
    - render_to_pdf_bytes(): Render layout to PDF bytes
    - render_to_pdf(): Render layout to a PDF file
    - write_pdf(): Write PDF bytes to a file
    - render_preview(): Render one page to a PIL image

Dependencies:
    - reportlab: PDF generation
    - PIL: Preview images
    - builder.layout.models: LayoutResult

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf, render_to_pdf_bytes, write_pdf
from .preview import render_preview

__all__ = [
    "render_to_pdf",
    "render_to_pdf_bytes",
    "write_pdf",
    "render_preview",
]
