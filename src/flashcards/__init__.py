"""Term/definition flashcards with quizzes, mistake tracking and text-file import/export."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .deck import Deck
from .models import AnswerResult, Card, HardestCards
from .service import FlashcardService

__all__ = ["AnswerResult", "Card", "Deck", "FlashcardService", "HardestCards", "__version__"]


def _source_version() -> str | None:
    """Read ``[project].version`` from a checkout's pyproject.toml, if running from source."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        with pyproject.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
        if project.get("name") == "flashcards":
            return str(project.get("version"))
    return None


__version__ = _source_version()
if __version__ is None:
    try:
        __version__ = version("flashcards")
    except PackageNotFoundError:
        __version__ = "0+unknown"
