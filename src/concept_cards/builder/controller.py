"""
Module: builder.controller

Purpose:
    Orchestrate the complete card sheet pipeline.
    Build deck → Layout → Render

Key Functions:
    - generate_deck(): Build (or re-shuffle) a deck from a config
    - build_sheet(): Main entry point for producing the PDF

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.deck: Deck building
    - builder.layout: Page layout
    - builder.output: PDF rendering

Used By:
    - concept_cards.cli: Command line front end
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from concept_cards.core.models import Deck

from .config import BuilderConfig
from .deck import build_deck
from .layout import layout_deck, LayoutResult
from .output import render_to_pdf_bytes, write_pdf

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        deck: The deck that was laid out
        layout: Page layout with drawing instructions
        pdf_bytes: Complete PDF document
        page_count: Number of pages generated
        output_path: Path the PDF was written to (if any)
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_sheet(config)
        >>> print(f"Generated {result.page_count} pages")
    """
    deck: Deck
    layout: LayoutResult
    pdf_bytes: bytes
    page_count: int
    output_path: Optional[Path]
    metadata: dict
    warnings: tuple[str, ...]


def generate_deck(config: BuilderConfig) -> Deck:
    """
    Build a fresh deck for the configuration.

    Calling again re-shuffles: the concept multiset stays the same for
    a fixed target count, the order and card ids change.
    """
    return build_deck(config.concepts, config.target_count, seed=config.seed)


def build_sheet(config: BuilderConfig, deck: Optional[Deck] = None) -> BuildResult:
    """
    Build a printable card sheet from start to finish.

    Pipeline:
    1. Build the deck (unless one is passed in)
    2. Lay out cards onto A4 pages
    3. Render the PDF in memory
    4. (Optional) Write the PDF to config.output_path

    Args:
        config: Build configuration
        deck: Previously generated deck to print as is

    Returns:
        BuildResult with the PDF bytes and metadata

    Raises:
        BuildError: If rendering or writing fails. No partial document
            is returned.
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    if deck is None:
        deck = generate_deck(config)

    counts = deck.concept_counts()
    if any(n > 1 for n in counts.values()):
        warnings.append(
            f"{sum(counts.values())} concept slots for {len(counts)} concepts; "
            f"concepts will be repeated"
        )

    layout = layout_deck(deck, config.title, config.layout)
    warnings.extend(layout.warnings)

    try:
        pdf_bytes = render_to_pdf_bytes(layout)
    except Exception as e:
        raise BuildError(f"Failed to render PDF: {e}") from e

    output_path = None
    if config.output_path is not None:
        output_path = Path(config.output_path)
        try:
            write_pdf(pdf_bytes, output_path)
        except OSError as e:
            raise BuildError(f"Failed to write PDF to {output_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    metadata = {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "title": layout.title.text,
        "title_font_size": layout.title.font_size,
        "card_count": len(deck),
        "concept_count": len(config.concepts),
        "page_count": layout.page_count,
        "deck_nonce": deck.nonce,
        "duration_seconds": round(elapsed, 3),
    }

    logger.info(
        f"Built {len(deck)} cards on {layout.page_count} pages in {elapsed:.2f}s"
    )

    return BuildResult(
        deck=deck,
        layout=layout,
        pdf_bytes=pdf_bytes,
        page_count=layout.page_count,
        output_path=output_path,
        metadata=metadata,
        warnings=tuple(warnings),
    )
