"""
Module: builder.deck

Purpose:
    Deck building: spread concepts pseudo-randomly across cards,
    reusing them cyclically when supply is scarce.

Key Functions:
    - build_deck(): Main entry point

Key Classes:
    - DeckError: Raised for unusable input
"""

from .builder import build_deck, new_nonce, DeckError

__all__ = [
    "build_deck",
    "new_nonce",
    "DeckError",
]
