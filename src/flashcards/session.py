"""Console I/O that records every printed and typed line."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .card_file import write_lines

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]

logger = logging.getLogger(__name__)


class EndOfInput(EOFError):
    """Raised when the line source is exhausted while a line is expected."""


class SessionConsole:
    """Line-oriented console that keeps a chronological session transcript."""

    def __init__(self, input_fn: InputFn = input, print_fn: PrintFn = print) -> None:
        self._input_fn = input_fn
        self._print_fn = print_fn
        self._transcript: list[str] = []

    @property
    def transcript(self) -> tuple[str, ...]:
        """Return every recorded line in order."""
        return tuple(self._transcript)

    def say(self, message: str) -> None:
        """Print one line and record it."""
        self._print_fn(message)
        self._transcript.append(message)

    def read(self) -> str:
        """Read one line and record it."""
        try:
            line = self._input_fn("")
        except EOFError as exc:
            raise EndOfInput("input ended while waiting for a line") from exc
        self._transcript.append(line)
        return line

    def prompt(self, message: str) -> str:
        """Print a prompt line, then read the answer."""
        self.say(message)
        return self.read()

    def save(self, path: Path | str) -> int:
        """Write the transcript to a UTF-8 file and return the number of lines."""
        lines = list(self._transcript)
        write_lines(path, lines)
        logger.info("Saved %d transcript lines to %s", len(lines), path)
        return len(lines)
