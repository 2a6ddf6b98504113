"""
Module: concepts

Purpose:
    Concept ingestion. Turns raw text into a clean list of unique,
    trimmed concept strings and provides the card-count helpers the
    front ends use before building a deck.

Key Functions:
    - parse_concepts(): Split raw text into concepts
    - normalize_concepts(): Trim, drop empties, dedupe
    - suggested_card_count(): Default target card count
    - needs_repetition(): Whether concepts will be reused

Dependencies:
    - re (std)

Used By:
    - concept_cards.cli: Reading concept files
    - builder.config: Validating BuilderConfig
"""

from __future__ import annotations

import re
from typing import Iterable, List

CONCEPTS_PER_CARD = 5
MIN_CONCEPTS = CONCEPTS_PER_CARD
MAX_TITLE_LENGTH = 25
DEFAULT_TITLE = "wiskunde"

# One concept per line; tabs and semicolons also separate entries
_SEPARATOR_RE = re.compile(r"[\r\n\t;]+")


def normalize_concepts(items: Iterable[str]) -> List[str]:
    """
    Trim each item, drop empties and remove duplicates.

    Uniqueness is case-sensitive. The first occurrence of each concept
    keeps its position.

    Args:
        items: Raw concept strings

    Returns:
        List of unique, non-empty, trimmed concepts

    Example:
        >>> normalize_concepts([" Pi ", "pi", "Pi", ""])
        ['Pi', 'pi']
    """
    # dict preserves insertion order and gives set semantics
    unique = dict.fromkeys(item.strip() for item in items)
    return [item for item in unique if item]


def parse_concepts(text: str) -> List[str]:
    """
    Parse raw text input into concepts.

    Args:
        text: Text with one concept per line (tabs or ';' also split)

    Returns:
        Normalized concept list
    """
    return normalize_concepts(_SEPARATOR_RE.split(text))


def suggested_card_count(concept_count: int) -> int:
    """
    Number of full cards the concepts can fill, at least 1.

    Example:
        >>> suggested_card_count(12)
        2
    """
    return max(1, concept_count // CONCEPTS_PER_CARD)


def needs_repetition(concept_count: int, target_count: int) -> bool:
    """Check if building `target_count` cards will reuse concepts."""
    return concept_count < target_count * CONCEPTS_PER_CARD
