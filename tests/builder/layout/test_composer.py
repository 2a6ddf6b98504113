"""
Unit tests for card drawing instructions.
"""

import pytest

from concept_cards.builder.layout import (
    DrawLine,
    DrawRect,
    DrawText,
    LayoutConfig,
    TitleFit,
    compose_card,
    compose_page,
    paginate,
    place_card,
    mm_to_pt,
)
from concept_cards.core.models import Card


@pytest.fixture
def config():
    return LayoutConfig()


@pytest.fixture
def fit():
    return TitleFit(text="wiskunde", font_size=12.0, text_width=54.7, max_width=119.0)


@pytest.fixture
def placement(config):
    card = Card("card-0-x", ("een", "twee", "drie", "vier", "vijf"))
    return place_card(card, 0, config)


class TestComposeCard:
    """Tests for compose_card()."""

    def test_when_full_card_then_paint_order(self, placement, fit, config):
        instructions = compose_card(placement, fit, config)

        kinds = [type(i).__name__ for i in instructions]
        assert kinds == [
            "DrawRect", "DrawRect", "DrawText",
            "DrawText", "DrawLine",
            "DrawText", "DrawLine",
            "DrawText", "DrawLine",
            "DrawText", "DrawLine",
            "DrawText",
        ]

    def test_background_when_composed_then_full_card_white_with_grey_border(self, placement, fit, config):
        background = compose_card(placement, fit, config)[0]

        assert background == DrawRect(
            x=placement.x,
            y=placement.y,
            width=placement.width,
            height=placement.height,
            fill=(1.0, 1.0, 1.0),
            stroke=(0.8, 0.8, 0.8),
            stroke_width=1.0,
        )

    def test_strip_when_composed_then_left_edge_full_height(self, placement, fit, config):
        strip = compose_card(placement, fit, config)[1]

        assert strip.x == placement.x
        assert strip.y == placement.y
        assert strip.width == pytest.approx(mm_to_pt(10))
        assert strip.height == placement.height
        assert strip.fill == config.accent_color
        assert strip.stroke is None

    def test_title_when_composed_then_rotated_inside_strip(self, placement, fit, config):
        title = compose_card(placement, fit, config)[2]

        assert isinstance(title, DrawText)
        assert title.text == "wiskunde"
        assert title.rotation == 90.0
        assert title.size == 12.0
        assert placement.x < title.x < placement.x + config.strip_width
        assert title.y == pytest.approx(placement.y + placement.height / 2 - 54.7 / 2)

    def test_concepts_when_composed_then_stacked_from_top(self, placement, fit, config):
        texts = [i for i in compose_card(placement, fit, config) if isinstance(i, DrawText)][1:]

        assert [t.text for t in texts] == ["een", "twee", "drie", "vier", "vijf"]
        expected_x = placement.x + mm_to_pt(10 + 5)
        for idx, text in enumerate(texts):
            assert text.x == pytest.approx(expected_x)
            assert text.y == pytest.approx(placement.top - mm_to_pt(10 + 8 * idx))
            assert text.size == 11.0
            assert text.rotation == 0.0
            assert text.color == config.concept_color

    def test_dividers_when_composed_then_below_each_row_but_last(self, placement, fit, config):
        instructions = compose_card(placement, fit, config)
        lines = [i for i in instructions if isinstance(i, DrawLine)]

        assert len(lines) == 4
        for idx, line in enumerate(lines):
            row_y = placement.top - mm_to_pt(10 + 8 * idx)
            assert line.y1 == line.y2 == pytest.approx(row_y - mm_to_pt(3))
            assert line.x1 == pytest.approx(placement.x + mm_to_pt(15))
            assert line.x2 == pytest.approx(placement.right - mm_to_pt(5))
            assert line.thickness == 0.5

    def test_when_card_has_fewer_concepts_then_padded_with_placeholder(self, fit, config):
        placement = place_card(Card("card-0-x", ("een", "twee")), 0, config)

        texts = [i for i in compose_card(placement, fit, config) if isinstance(i, DrawText)][1:]

        assert [t.text for t in texts] == ["een", "twee", "-", "-", "-"]
        assert texts[2].color == config.placeholder_color
        assert texts[1].color == config.concept_color

    def test_when_card_has_more_concepts_then_only_five_drawn(self, fit, config):
        placement = place_card(Card("card-0-x", tuple("ABCDEFG")), 0, config)

        texts = [i for i in compose_card(placement, fit, config) if isinstance(i, DrawText)][1:]

        assert [t.text for t in texts] == list("ABCDE")


class TestComposePage:
    """Tests for compose_page()."""

    def test_when_page_composed_then_instructions_for_every_card(self, deck_factory, fit, config):
        page = paginate(deck_factory(3), config)[0]

        composed = compose_page(page, fit, config)

        assert len(composed.instructions) == 3 * 12
        assert composed.placements == page.placements
        assert page.instructions == ()
