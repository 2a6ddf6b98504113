"""
Module: builder.deck.builder

Purpose:
    Build a Deck from concepts and a target card count.

Algorithm:
    1. Shuffle a copy of the concepts (uniform, non-cryptographic)
    2. Walk a cyclic index over the shuffled list
    3. Each card takes the next CONCEPTS_PER_CARD values, wrapping at the end

    Wrapping can put the same concept on a card twice when supply is
    scarce. That is accepted; it is logged, not prevented.

Dependencies:
    - random (std)
    - concept_cards.core.models: Card, Deck

Used By:
    - builder.controller: Build pipeline
"""

from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Optional, Sequence

from concept_cards.core.concepts import CONCEPTS_PER_CARD
from concept_cards.core.models import Card, Deck

logger = logging.getLogger(__name__)


class DeckError(ValueError):
    """Deck cannot be built from the given input."""
    pass


def new_nonce() -> str:
    """
    Create a per-run token for card ids.

    Millisecond timestamp plus random hex, so two runs in the same
    millisecond still differ.
    """
    return f"{int(time.time() * 1000)}{uuid.uuid4().hex[:6]}"


def build_deck(
    concepts: Sequence[str],
    target_count: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    concepts_per_card: int = CONCEPTS_PER_CARD,
) -> Deck:
    """
    Build a deck of `target_count` cards.

    Callers are expected to refuse fewer than MIN_CONCEPTS concepts
    before calling; this function only rejects input it cannot use at all.

    Args:
        concepts: Unique concept strings
        target_count: Number of cards to build (>= 1)
        seed: Optional seed for a reproducible shuffle
        rng: Optional Random instance (takes precedence over seed)
        concepts_per_card: Concepts per card

    Returns:
        Deck with exactly target_count cards

    Raises:
        DeckError: If concepts is empty or target_count < 1

    Example:
        >>> deck = build_deck(list("ABCDEFGHIJ"), 2, seed=1)
        >>> len(deck), len(deck[0].concepts)
        (2, 5)
    """
    if not concepts:
        raise DeckError("Cannot build a deck without concepts")
    if target_count < 1:
        raise DeckError(f"target_count must be at least 1: {target_count}")

    if rng is None:
        rng = random.Random(seed)

    shuffled = list(concepts)
    rng.shuffle(shuffled)

    nonce = new_nonce()
    cards = []
    index = 0

    for i in range(target_count):
        card_concepts = []
        for _ in range(concepts_per_card):
            card_concepts.append(shuffled[index % len(shuffled)])
            index += 1
        cards.append(Card(id=f"card-{i}-{nonce}", concepts=tuple(card_concepts)))

    needed = target_count * concepts_per_card
    if needed > len(shuffled):
        logger.warning(
            f"{needed} concept slots for {len(shuffled)} concepts, "
            f"concepts will be repeated"
        )

    logger.info(f"Built deck of {target_count} cards from {len(shuffled)} concepts")

    return Deck(cards=tuple(cards), nonce=nonce)
