"""Read and write the three-lines-per-card text format."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .models import Card

logger = logging.getLogger(__name__)

LINES_PER_CARD = 3


class CardFileError(ValueError):
    """Raised when a card file cannot be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


def _parse_mistakes(raw: str, line_number: int) -> int:
    """Parse one mistake-count line as a non-negative decimal integer."""
    if not raw.isascii() or not raw.isdecimal():
        raise ValueError(f"line {line_number}: invalid mistake count {raw!r}")
    return int(raw)


def parse_cards(lines: list[str]) -> list[Card]:
    """Build cards from term, definition and mistake-count line triples."""
    if len(lines) % LINES_PER_CARD:
        raise ValueError(f"incomplete card group at line {len(lines) - len(lines) % LINES_PER_CARD + 1}")
    cards: list[Card] = []
    for start in range(0, len(lines), LINES_PER_CARD):
        term, definition, raw_mistakes = lines[start : start + LINES_PER_CARD]
        cards.append(Card(term=term, definition=definition, mistakes=_parse_mistakes(raw_mistakes, start + 3)))
    return cards


def read_lines(path: Path | str) -> list[str]:
    """Read UTF-8 text lines split on ``\\n`` only, so other separators stay in the fields."""
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except FileNotFoundError as exc:
        raise CardFileError(path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise CardFileError(path, "not valid UTF-8") from exc
    except OSError as exc:
        raise CardFileError(path, exc.strerror or str(exc)) from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def read_cards(path: Path | str) -> list[Card]:
    """Load every card from a card file, failing before any card is returned."""
    lines = read_lines(path)
    try:
        cards = parse_cards(lines)
    except ValueError as exc:
        raise CardFileError(path, str(exc)) from exc
    logger.info("Read %d cards from %s", len(cards), path)
    return cards


def write_lines(path: Path | str, lines: Iterable[str]) -> None:
    """Write one entry per line as UTF-8 text."""
    with Path(path).open("w", encoding="utf-8", newline="\n") as handle:
        for line in lines:
            handle.write(f"{line}\n")


def write_cards(path: Path | str, cards: Iterable[Card]) -> int:
    """Write cards in order and return how many were written."""
    rows = list(cards)
    write_lines(path, (field for card in rows for field in (card.term, card.definition, str(card.mistakes))))
    logger.info("Wrote %d cards to %s", len(rows), path)
    return len(rows)
