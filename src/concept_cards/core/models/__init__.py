"""
Core Models Package

Immutable data models shared by the deck builder and the layout engine.

All models in this package are frozen dataclasses. A regenerated deck is a
new value with fresh card identities; nothing is mutated in place.
"""

from .cards import Card, Deck, PLACEHOLDER_CONCEPT

__all__ = [
    "Card",
    "Deck",
    "PLACEHOLDER_CONCEPT",
]
