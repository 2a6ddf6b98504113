"""
Module: builder.config

Purpose:
    Configuration dataclass for the card building pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building a card sheet

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - concept_cards.cli: Command line front end
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from concept_cards.core.concepts import (
    DEFAULT_TITLE,
    MAX_TITLE_LENGTH,
    MIN_CONCEPTS,
)

from .layout.config import LayoutConfig


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a card sheet (immutable).

    Attributes:
        concepts: Unique, trimmed concepts (see core.concepts.normalize_concepts)
        target_count: Number of cards to build
        title: Title printed in every card's accent strip
        seed: Optional seed for a reproducible shuffle
        output_path: Where to write the PDF (None keeps it in memory only)
        layout: Page layout configuration

    Example:
        >>> config = BuilderConfig(
        ...     concepts=("A", "B", "C", "D", "E"),
        ...     target_count=3,
        ... )
        >>> config.title
        'wiskunde'
    """

    # Required
    concepts: Tuple[str, ...]
    target_count: int

    # Cards
    title: str = DEFAULT_TITLE
    seed: Optional[int] = None

    # Output
    output_path: Optional[Path] = None

    # Layout
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Accept any sequence but store a tuple
        object.__setattr__(self, "concepts", tuple(self.concepts))

        if len(self.concepts) < MIN_CONCEPTS:
            raise ValueError(
                f"At least {MIN_CONCEPTS} concepts are needed: {len(self.concepts)}"
            )
        if self.target_count < 1:
            raise ValueError(f"target_count must be at least 1: {self.target_count}")
        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValueError(
                f"title must be at most {MAX_TITLE_LENGTH} characters: {self.title!r}"
            )
