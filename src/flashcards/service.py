"""Application service for the flashcard deck, quizzes and card files."""

from __future__ import annotations

import logging
from pathlib import Path

from .card_file import read_cards, write_cards
from .deck import Deck
from .models import AnswerResult, Card, HardestCards

logger = logging.getLogger(__name__)


class FlashcardService:
    """Coordinates deck mutations, quiz scoring and import/export."""

    def __init__(self, export_path: Path | str | None = None) -> None:
        """Initialize an empty deck with an optional export-on-exit target."""
        self.deck = Deck()
        self.export_path = str(export_path) if export_path is not None else None

    def require_new_term(self, term: str) -> None:
        """Fail with ``DuplicateCardError`` when the term is already taken."""
        self.deck.require_new_term(term)

    def add_card(self, term: str, definition: str) -> Card:
        """Add one card with a fresh mistake counter."""
        card = self.deck.add(term, definition)
        logger.debug("Added card %r", term)
        return card

    def remove_card(self, term: str) -> bool:
        """Remove one card by term."""
        return self.deck.remove(term)

    def list_cards(self) -> list[Card]:
        """Return cards in collection order."""
        return list(self.deck)

    def import_cards(self, import_path: Path | str) -> int:
        """Upsert every card from a card file and return how many were read.

        The file is parsed completely before the deck changes, so a malformed
        file leaves the deck untouched.
        """
        cards = read_cards(import_path)
        for card in cards:
            self.deck.upsert(card)
        logger.info("Imported %d cards from %s", len(cards), import_path)
        return len(cards)

    def export_cards(self, export_path: Path | str) -> int:
        """Write all cards to a card file and return how many were written."""
        return write_cards(export_path, self.deck)

    def quiz_terms(self, count: int) -> list[str]:
        """Return ``count`` terms cycling through the deck in collection order."""
        if count < 0:
            raise ValueError("Question count must not be negative.")
        terms = self.deck.terms()
        if count and not terms:
            raise LookupError("There are no cards to ask.")
        return [terms[index % len(terms)] for index in range(count)]

    def check_answer(self, term: str, answer: str) -> AnswerResult:
        """Score one answer and record a mistake when it is wrong."""
        expected = self.deck.definition(term)
        if answer == expected:
            return AnswerResult(term=term, expected=expected, correct=True)
        self.deck.record_mistake(term)
        return AnswerResult(
            term=term,
            expected=expected,
            correct=False,
            matched_term=self.deck.term_for_definition(answer, exclude=term),
        )

    def hardest_cards(self) -> HardestCards:
        """Return the terms with the highest mistake count."""
        return self.deck.hardest()

    def reset_stats(self) -> None:
        """Zero every mistake counter."""
        self.deck.reset_mistakes()
        logger.debug("Reset mistake counters for %d cards", len(self.deck))
