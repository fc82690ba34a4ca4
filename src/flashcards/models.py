"""Core domain models for term/definition flashcards."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """One flashcard with its recorded mistake count."""

    term: str
    definition: str
    mistakes: int = 0


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of checking one quiz answer."""

    term: str
    expected: str
    correct: bool
    matched_term: str | None = None


@dataclass(frozen=True)
class HardestCards:
    """Terms sharing the highest mistake count."""

    terms: tuple[str, ...]
    mistakes: int
