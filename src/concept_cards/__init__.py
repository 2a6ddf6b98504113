"""Top-level package for Concept Cards.

Provides subpackages:
- concept_cards.core – card/deck models and concept ingestion
- concept_cards.builder – deck builder, page layout engine and PDF output
- concept_cards.cli – command line front end
"""

DISTRIBUTION_NAME = "concept-cards"


def _version_from_pyproject(text: str):
    """Return the [project] version from pyproject.toml text, if present."""
    in_project = False
    for line in text.splitlines():
        line = line.strip()
        if line.startswith("["):
            in_project = line == "[project]"
        elif in_project and line.startswith("version") and "=" in line:
            return line.split("=", 1)[1].strip().strip('"').strip("'")
    return None


def _get_version() -> str:
    """Source checkout wins over installed metadata, so `-v` matches the tree."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.is_file():
        try:
            found = _version_from_pyproject(pyproject.read_text(encoding="utf-8"))
        except OSError:
            found = None
        if found:
            return found

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 the Concept Cards authors. Licensed under the MIT License"
__all__: list[str] = ["__version__"]
