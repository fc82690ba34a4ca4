"""In-memory card collection with a definition index and mistake counters."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .models import Card, HardestCards

logger = logging.getLogger(__name__)


class DuplicateCardError(ValueError):
    """Raised when a new card reuses an existing term."""


class DuplicateDefinitionError(ValueError):
    """Raised when a new card reuses an existing definition."""


class Deck:
    """Insertion-ordered term -> definition map kept in sync with its reverse index."""

    def __init__(self) -> None:
        self._definitions: dict[str, str] = {}
        self._terms_by_definition: dict[str, dict[str, None]] = {}
        self._mistakes: dict[str, int] = {}
        self._terms: tuple[str, ...] | None = None

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, term: object) -> bool:
        return term in self._definitions

    def __iter__(self) -> Iterator[Card]:
        for term, definition in self._definitions.items():
            yield Card(term=term, definition=definition, mistakes=self._mistakes[term])

    def terms(self) -> tuple[str, ...]:
        """Return terms in insertion order, cached until the next add or remove."""
        if self._terms is None:
            self._terms = tuple(self._definitions)
        return self._terms

    def definition(self, term: str) -> str:
        """Return the definition of one term."""
        return self._definitions[term]

    def mistakes(self, term: str) -> int:
        """Return the mistake count of one term."""
        return self._mistakes[term]

    def has_definition(self, definition: str) -> bool:
        """Return whether any card uses this definition."""
        return definition in self._terms_by_definition

    def term_for_definition(self, definition: str, exclude: str | None = None) -> str | None:
        """Return the first term whose definition matches, skipping ``exclude``."""
        for term in self._terms_by_definition.get(definition, ()):
            if term != exclude:
                return term
        return None

    def require_new_term(self, term: str) -> None:
        """Raise ``DuplicateCardError`` if a card already uses this term."""
        if term in self._definitions:
            raise DuplicateCardError(f'The card "{term}" already exists.')

    def add(self, term: str, definition: str) -> Card:
        """Insert a new card with zero mistakes."""
        self.require_new_term(term)
        if definition in self._terms_by_definition:
            raise DuplicateDefinitionError(f'The definition "{definition}" already exists.')
        self._put(term, definition, 0)
        return Card(term=term, definition=definition)

    def upsert(self, card: Card) -> None:
        """Insert a card or overwrite the existing card with the same term in place."""
        if card.mistakes < 0:
            raise ValueError(f'Card "{card.term}" has a negative mistake count.')
        if card.term in self._definitions:
            self._unindex(card.term, self._definitions[card.term])
        self._put(card.term, card.definition, card.mistakes)

    def remove(self, term: str) -> bool:
        """Delete one card and its counter. Returns False when the term is absent."""
        definition = self._definitions.pop(term, None)
        if definition is None:
            return False
        self._unindex(term, definition)
        del self._mistakes[term]
        self._terms = None
        logger.debug("Removed card %r", term)
        return True

    def record_mistake(self, term: str) -> int:
        """Increment and return the mistake count of one term."""
        self._mistakes[term] += 1
        return self._mistakes[term]

    def reset_mistakes(self) -> None:
        """Zero every mistake counter without removing cards."""
        for term in self._mistakes:
            self._mistakes[term] = 0

    def hardest(self) -> HardestCards:
        """Return every term tied for the highest non-zero mistake count."""
        highest = 0
        terms: list[str] = []
        for term, count in self._mistakes.items():
            if count > highest:
                highest = count
                terms = [term]
            elif count == highest and count > 0:
                terms.append(term)
        return HardestCards(terms=tuple(terms), mistakes=highest)

    def _put(self, term: str, definition: str, mistakes: int) -> None:
        if term not in self._definitions:
            self._terms = None
        self._definitions[term] = definition
        self._terms_by_definition.setdefault(definition, {})[term] = None
        self._mistakes[term] = mistakes
        logger.debug("Stored card %r", term)

    def _unindex(self, term: str, definition: str) -> None:
        owners = self._terms_by_definition[definition]
        del owners[term]
        if not owners:
            del self._terms_by_definition[definition]
