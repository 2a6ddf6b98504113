"""
Module: cards

Purpose:
    Provides Card and Deck dataclasses. A Card carries five concept strings
    in display order; a Deck is the ordered result of one generation run.

Key Classes:
    - Card: One printable card (id + concepts)
    - Deck: Ordered cards from one generation run

Dependencies:
    - dataclasses (std)

Used By:
    - builder.deck.builder: Creates decks
    - builder.layout: Positions and draws cards
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator

# Glyph drawn in empty concept rows
PLACEHOLDER_CONCEPT = "-"


@dataclass(frozen=True)
class Card:
    """
    A single game card.

    Attributes:
        id: Identifier, unique per generation run
        concepts: Concept strings in display order (top to bottom)

    Example:
        >>> card = Card("card-0-abc", ("A", "B", "C", "D", "E"))
        >>> card.padded(5)
        ('A', 'B', 'C', 'D', 'E')
    """

    id: str
    concepts: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate card on construction."""
        if not self.id:
            raise ValueError("Card id must not be empty")

    def padded(self, slots: int) -> tuple[str, ...]:
        """
        Return exactly `slots` concept rows.

        Extra concepts are dropped; missing rows are filled with
        PLACEHOLDER_CONCEPT.
        """
        rows = self.concepts[:slots]
        return rows + (PLACEHOLDER_CONCEPT,) * (slots - len(rows))

    @property
    def has_duplicates(self) -> bool:
        """True if the same concept appears more than once on this card."""
        return len(set(self.concepts)) != len(self.concepts)


@dataclass(frozen=True)
class Deck:
    """
    Ordered cards from one generation run.

    Attributes:
        cards: Cards in print order
        nonce: Generation token shared by all card ids of this run

    Invariants:
        - Card ids are unique within the deck
    """

    cards: tuple[Card, ...]
    nonce: str = ""

    def __post_init__(self) -> None:
        """Validate deck on construction."""
        ids = [card.id for card in self.cards]
        if len(ids) != len(set(ids)):
            raise ValueError("Card ids must be unique within a deck")

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    @property
    def is_empty(self) -> bool:
        """Check if deck has no cards."""
        return len(self.cards) == 0

    def concept_counts(self) -> Counter[str]:
        """Multiset of concepts used across all cards."""
        counts: Counter[str] = Counter()
        for card in self.cards:
            counts.update(card.concepts)
        return counts
