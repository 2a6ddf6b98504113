"""
Unit tests for the deck builder.

Covers deck length, cyclic reuse, fairness and regeneration behaviour.
"""

import logging
import random
from collections import Counter

import pytest

from concept_cards.builder.deck import build_deck, DeckError


class TestBuildDeckShape:
    """Deck length and card size."""

    @pytest.mark.parametrize("target", [1, 2, 7, 8, 9, 40])
    def test_when_target_given_then_deck_has_target_cards(self, ten_concepts, target):
        deck = build_deck(ten_concepts, target, seed=1)
        assert len(deck) == target

    @pytest.mark.parametrize("target", [1, 3, 13])
    def test_when_built_then_every_card_has_five_concepts(self, ten_concepts, target):
        deck = build_deck(ten_concepts, target, seed=2)
        assert all(len(card.concepts) == 5 for card in deck)

    def test_when_ten_concepts_two_cards_then_each_concept_used_once(self, ten_concepts):
        # Arrange / Act
        deck = build_deck(ten_concepts, 2)

        # Assert
        assert len(deck) == 2
        assert deck.concept_counts() == Counter({c: 1 for c in ten_concepts})

    def test_when_exactly_five_concepts_then_every_card_has_same_concepts(self, five_concepts):
        deck = build_deck(five_concepts, 3)

        assert len(deck) == 3
        for card in deck:
            assert set(card.concepts) == set(five_concepts)
        # Cycle length equals card size, so every card repeats the same permutation
        assert deck[0].concepts == deck[1].concepts == deck[2].concepts

    def test_when_single_concept_then_repeated_on_every_slot(self):
        """Degenerate supply is accepted, not refused."""
        deck = build_deck(["enig"], 2)
        assert all(card.concepts == ("enig",) * 5 for card in deck)


class TestBuildDeckDistribution:
    """Cyclic fairness and regeneration."""

    @pytest.mark.parametrize("concept_count, target", [(7, 4), (12, 5), (6, 9), (23, 11)])
    def test_when_concepts_reused_then_each_appears_at_least_floor_share(self, concept_count, target):
        concepts = [f"c{i}" for i in range(concept_count)]
        deck = build_deck(concepts, target, seed=3)

        counts = deck.concept_counts()
        minimum = (target * 5) // concept_count
        assert all(counts[c] >= minimum for c in concepts)
        assert max(counts.values()) - min(counts[c] for c in concepts) <= 1

    def test_when_fewer_than_five_concepts_then_card_repeats_concept(self):
        """Wrap-around inside a single card is accepted."""
        deck = build_deck(["a", "b", "c"], 2, seed=4)

        assert all(card.has_duplicates for card in deck)

    def test_when_at_least_five_concepts_then_no_card_repeats_concept(self):
        concepts = [f"c{i}" for i in range(6)]
        deck = build_deck(concepts, 12, seed=4)

        assert not any(card.has_duplicates for card in deck)

    def test_when_regenerated_then_multiset_preserved(self, ten_concepts):
        first = build_deck(ten_concepts, 4, seed=10)
        second = build_deck(ten_concepts, 4, seed=11)

        assert first.concept_counts() == second.concept_counts()
        assert [c.concepts for c in first] != [c.concepts for c in second]

    def test_when_regenerated_then_card_ids_fresh(self, ten_concepts):
        first = build_deck(ten_concepts, 3, seed=5)
        second = build_deck(ten_concepts, 3, seed=5)

        assert {c.id for c in first}.isdisjoint({c.id for c in second})

    def test_when_same_seed_then_same_order(self, ten_concepts):
        first = build_deck(ten_concepts, 3, seed=99)
        second = build_deck(ten_concepts, 3, seed=99)

        assert [c.concepts for c in first] == [c.concepts for c in second]

    def test_when_rng_given_then_used_for_shuffle(self, ten_concepts):
        expected = list(ten_concepts)
        random.Random(7).shuffle(expected)

        deck = build_deck(ten_concepts, 2, rng=random.Random(7))

        assert deck[0].concepts + deck[1].concepts == tuple(expected)

    def test_when_built_then_input_not_mutated(self, ten_concepts):
        original = list(ten_concepts)
        build_deck(ten_concepts, 2, seed=1)
        assert ten_concepts == original

    def test_card_ids_carry_index_and_nonce(self, ten_concepts):
        deck = build_deck(ten_concepts, 3, seed=1)
        assert [c.id for c in deck] == [f"card-{i}-{deck.nonce}" for i in range(3)]


class TestBuildDeckErrors:
    """Input the builder cannot use."""

    def test_when_no_concepts_then_raises_deck_error(self):
        with pytest.raises(DeckError, match="without concepts"):
            build_deck([], 1)

    @pytest.mark.parametrize("target", [0, -3])
    def test_when_target_below_one_then_raises_deck_error(self, ten_concepts, target):
        with pytest.raises(DeckError, match="at least 1"):
            build_deck(ten_concepts, target)

    def test_deck_error_is_value_error(self):
        assert issubclass(DeckError, ValueError)

    def test_when_repetition_needed_then_warning_logged(self, five_concepts, caplog):
        with caplog.at_level(logging.WARNING, logger="concept_cards.builder.deck.builder"):
            build_deck(five_concepts, 2, seed=1)
        assert "repeated" in caplog.text
