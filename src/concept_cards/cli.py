"""
Command line front end.

Reads concepts from a text file (one per line), builds the deck and
writes the print-ready PDF.

Usage:
    concept-cards concepts.txt -n 8 -t wiskunde -o cards.pdf
    concept-cards - < concepts.txt --preview page1.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from concept_cards import __version__
from concept_cards.builder import BuilderConfig, BuildError, build_sheet
from concept_cards.builder.output import render_preview
from concept_cards.core.concepts import (
    DEFAULT_TITLE,
    MAX_TITLE_LENGTH,
    MIN_CONCEPTS,
    parse_concepts,
    suggested_card_count,
)
from concept_cards.logging_utils import configure_logging, detach_handler

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("30-seconds-cards.pdf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concept-cards",
        description="Generate a print-ready A4 PDF of concept cards (5 concepts per card, 8 cards per page).",
    )
    parser.add_argument(
        "concepts",
        help="Text file with one concept per line, or '-' to read stdin",
    )
    parser.add_argument(
        "-n", "--cards", type=int, default=None,
        help="Number of cards (default: as many full cards as the concepts allow)",
    )
    parser.add_argument(
        "-t", "--title", default=DEFAULT_TITLE,
        help=f"Title on each card, max {MAX_TITLE_LENGTH} characters (default: {DEFAULT_TITLE})",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=DEFAULT_OUTPUT,
        help=f"Output PDF path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible shuffle")
    parser.add_argument("--preview", type=Path, default=None, help="Also write a PNG preview of page 1")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_concepts(source: str) -> List[str]:
    if source == "-":
        return parse_concepts(sys.stdin.read())
    return parse_concepts(Path(source).read_text(encoding="utf-8"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = configure_logging(args.verbose)
    try:
        return _run(parser, args)
    finally:
        detach_handler(handler)


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    try:
        concepts = _read_concepts(args.concepts)
    except OSError as e:
        logger.error(f"Could not read concepts: {e}")
        return 2

    if len(concepts) < MIN_CONCEPTS:
        logger.error(f"Need at least {MIN_CONCEPTS} unique concepts, found {len(concepts)}")
        return 2

    target = args.cards if args.cards is not None else suggested_card_count(len(concepts))
    logger.info(f"{len(concepts)} concepts found, building {target} cards")

    try:
        config = BuilderConfig(
            concepts=tuple(concepts),
            target_count=target,
            title=args.title,
            seed=args.seed,
            output_path=args.output,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        result = build_sheet(config)
    except BuildError as e:
        logger.error(f"Failed to generate PDF: {e}")
        return 1

    if args.preview is not None and result.page_count:
        args.preview.parent.mkdir(parents=True, exist_ok=True)
        render_preview(result.layout, 0).save(args.preview)
        logger.info(f"Wrote preview {args.preview}")

    print(f"{result.output_path} ({len(result.deck)} cards, {result.page_count} pages)")
    return 0
