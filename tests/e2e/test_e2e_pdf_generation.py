"""
End-to-end tests: concept text → deck → PDF, inspected with pypdf.

Checks the printed sheet meets the physical requirements:
- A4 page size
- 8 cards per page, last page partial
- Every card's concepts and the title present
"""

import io
import math

import pytest

from concept_cards.builder import BuilderConfig, build_sheet
from concept_cards.core.concepts import parse_concepts, suggested_card_count

# Try to import pypdf for PDF inspection
try:
    from pypdf import PdfReader
    PYPDF_AVAILABLE = True
except ImportError:
    PYPDF_AVAILABLE = False


# A4 dimensions in points (1/72 inch)
A4_WIDTH_PT = 595.2765  # 210mm
A4_HEIGHT_PT = 841.89105  # 297mm
TOLERANCE_PT = 0.01

CONCEPT_TEXT = "\n".join(f"begrip {i}" for i in range(1, 51)) + "\nbegrip 1\n\n"


@pytest.fixture
def concepts():
    return parse_concepts(CONCEPT_TEXT)


@pytest.fixture
def built(concepts, tmp_path):
    config = BuilderConfig(
        concepts=tuple(concepts),
        target_count=suggested_card_count(len(concepts)),
        title="rekenen",
        seed=2024,
        output_path=tmp_path / "cards.pdf",
    )
    return build_sheet(config)


def test_concepts_parsed_without_duplicates(concepts):
    assert len(concepts) == 50


def test_deck_uses_every_concept_once(built, concepts):
    assert len(built.deck) == 10
    assert sorted(built.deck.concept_counts().elements()) == sorted(concepts)


@pytest.mark.skipif(not PYPDF_AVAILABLE, reason="pypdf not installed")
class TestPrintedSheet:
    """Inspect the written PDF."""

    def test_page_count_is_ceil_of_cards(self, built):
        reader = PdfReader(built.output_path)
        assert len(reader.pages) == math.ceil(len(built.deck) / 8) == 2

    def test_all_pages_are_a4_size(self, built):
        reader = PdfReader(io.BytesIO(built.pdf_bytes))
        for page in reader.pages:
            assert float(page.mediabox.width) == pytest.approx(A4_WIDTH_PT, abs=TOLERANCE_PT)
            assert float(page.mediabox.height) == pytest.approx(A4_HEIGHT_PT, abs=TOLERANCE_PT)

    def test_each_page_carries_its_cards(self, built):
        reader = PdfReader(io.BytesIO(built.pdf_bytes))

        for page_plan, page in zip(built.layout.pages, reader.pages):
            text = page.extract_text()
            for placement in page_plan.placements:
                for concept in placement.card.concepts:
                    assert concept in text

    def test_title_printed(self, built):
        reader = PdfReader(io.BytesIO(built.pdf_bytes))
        assert "rekenen" in reader.pages[0].extract_text()
