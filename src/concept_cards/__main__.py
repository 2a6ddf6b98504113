"""Allow `python -m concept_cards`."""

from concept_cards.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
