import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import concept_cards
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from concept_cards.core.models import Card, Deck


# Common test fixtures
@pytest.fixture
def ten_concepts():
    """Return ten unique concepts A..J."""
    return list("ABCDEFGHIJ")


@pytest.fixture
def five_concepts():
    """Return exactly five unique concepts."""
    return ["sinus", "cosinus", "tangens", "hoek", "driehoek"]


@pytest.fixture
def deck_factory():
    """Factory to create decks of sequentially named cards."""
    def _create(count: int, concepts_per_card: int = 5) -> Deck:
        cards = tuple(
            Card(
                id=f"card-{i}-test",
                concepts=tuple(f"c{i}-{j}" for j in range(concepts_per_card)),
            )
            for i in range(count)
        )
        return Deck(cards=cards, nonce="test")
    return _create
