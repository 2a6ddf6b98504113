"""
Unit tests for Card and Deck models.
"""

from collections import Counter

import pytest

from concept_cards.core.models import Card, Deck, PLACEHOLDER_CONCEPT


class TestCard:
    """Tests for Card dataclass."""

    def test_padded_when_five_concepts_then_unchanged(self):
        card = Card("card-0-x", ("A", "B", "C", "D", "E"))
        assert card.padded(5) == ("A", "B", "C", "D", "E")

    def test_padded_when_fewer_concepts_then_placeholder_fills(self):
        card = Card("card-0-x", ("A", "B"))
        assert card.padded(5) == ("A", "B") + (PLACEHOLDER_CONCEPT,) * 3

    def test_padded_when_more_concepts_then_truncated(self):
        card = Card("card-0-x", tuple("ABCDEFG"))
        assert card.padded(5) == tuple("ABCDE")

    def test_has_duplicates_when_concept_repeats_then_true(self):
        assert Card("card-0-x", ("A", "B", "A", "C", "D")).has_duplicates
        assert not Card("card-0-x", tuple("ABCDE")).has_duplicates

    def test_init_when_empty_id_then_raises_error(self):
        with pytest.raises(ValueError, match="Card id"):
            Card("", tuple("ABCDE"))

    def test_card_is_frozen(self):
        card = Card("card-0-x", tuple("ABCDE"))
        with pytest.raises(AttributeError):
            card.id = "other"


class TestDeck:
    """Tests for Deck dataclass."""

    def test_sequence_protocol(self, deck_factory):
        deck = deck_factory(3)
        assert len(deck) == 3
        assert deck[1].id == "card-1-test"
        assert [card.id for card in deck] == ["card-0-test", "card-1-test", "card-2-test"]

    def test_init_when_duplicate_ids_then_raises_error(self):
        card = Card("card-0-x", tuple("ABCDE"))
        with pytest.raises(ValueError, match="unique"):
            Deck(cards=(card, card))

    def test_concept_counts_when_cards_share_concepts_then_counted(self):
        deck = Deck(cards=(
            Card("card-0-x", ("A", "B", "C", "D", "E")),
            Card("card-1-x", ("A", "F", "G", "H", "I")),
        ))
        assert deck.concept_counts() == Counter({"A": 2, **{c: 1 for c in "BCDEFGHI"}})

    def test_is_empty(self):
        assert Deck(cards=()).is_empty
