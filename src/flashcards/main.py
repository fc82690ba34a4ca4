"""CLI entrypoint for the term/definition flashcard console."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from .card_file import CardFileError
from .deck import DuplicateCardError, DuplicateDefinitionError
from .service import FlashcardService
from .session import EndOfInput, InputFn, PrintFn, SessionConsole

logger = logging.getLogger(__name__)

MENU_PROMPT = "Input the action (add, remove, import, export, ask, exit, log, hardest card, reset stats):"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class _PathFlag(argparse.Action):
    """Store a path flag, leaving any earlier value when no path follows it."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: object,
        option_string: str | None = None,
    ) -> None:
        if values is not None:
            setattr(namespace, self.dest, values)


@dataclass(frozen=True)
class StartupOptions:
    """Configuration taken from the command line."""

    import_path: str | None = None
    export_path: str | None = None
    log_level: str = "WARNING"


def parse_options(argv: list[str] | None = None) -> StartupOptions:
    """Parse startup flags, ignoring tokens that are not recognized."""
    parser = argparse.ArgumentParser(
        prog="flashcards",
        description="Term/definition flashcard practice",
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument("-import", dest="import_path", nargs="?", action=_PathFlag, help="load cards before starting")
    parser.add_argument("-export", dest="export_path", nargs="?", action=_PathFlag, help="save cards here on exit")
    parser.add_argument("--log-level", dest="log_level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        logger.debug("Ignoring unknown arguments: %s", unknown)
    return StartupOptions(import_path=args.import_path, export_path=args.export_path, log_level=args.log_level)


def _service(options: StartupOptions) -> FlashcardService:
    """Create app service with the configured export target."""
    return FlashcardService(export_path=options.export_path)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    options = parse_options(argv)
    logging.basicConfig(level=options.log_level, format="%(levelname)s %(name)s: %(message)s")
    return play_shell(options)


def play_shell(options: StartupOptions | None = None, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run the command loop until ``exit`` or end of input."""
    options = options or StartupOptions()
    service = _service(options)
    console = SessionConsole(input_fn, print_fn)
    if options.import_path is not None:
        _load_cards(service, console, options.import_path)

    try:
        while True:
            action = console.prompt(MENU_PROMPT)
            if action == "add":
                _add_flow(service, console)
            elif action == "remove":
                _remove_flow(service, console)
            elif action == "import":
                _import_flow(service, console)
            elif action == "export":
                _export_flow(service, console)
            elif action == "ask":
                _ask_flow(service, console)
            elif action == "log":
                _log_flow(console)
            elif action == "hardest card":
                _hardest_card_flow(service, console)
            elif action == "reset stats":
                _reset_stats_flow(service, console)
            elif action == "exit":
                _exit_flow(service, console)
                return 0
            else:
                console.say("Unknown action")
    except EndOfInput:
        logger.warning("Input ended before 'exit'; stopping without export.")
        return 1


def _add_flow(service: FlashcardService, console: SessionConsole) -> None:
    """Add a card unless its term or definition is taken."""
    term = console.prompt("The card:")
    try:
        service.require_new_term(term)
        definition = console.prompt("The definition of the card:")
        service.add_card(term, definition)
    except (DuplicateCardError, DuplicateDefinitionError) as exc:
        console.say(str(exc))
        return
    console.say(f'The pair ("{term}":"{definition}") has been added.')


def _remove_flow(service: FlashcardService, console: SessionConsole) -> None:
    """Remove a card by term."""
    term = console.prompt("Which card?")
    if service.remove_card(term):
        console.say("The card has been removed.")
    else:
        console.say(f'Can\'t remove "{term}": there is no such card.')


def _load_cards(service: FlashcardService, console: SessionConsole, path: str) -> None:
    """Import a card file and report the result."""
    try:
        count = service.import_cards(path)
    except CardFileError as exc:
        logger.warning("Import failed: %s", exc)
        console.say("File not found.")
        return
    console.say(f"{count} cards have been loaded.")


def _save_cards(service: FlashcardService, console: SessionConsole, path: str) -> None:
    """Export all cards and report the result."""
    try:
        count = service.export_cards(path)
    except OSError as exc:
        logger.warning("Export to %s failed: %s", path, exc)
        console.say("Error writing file.")
        return
    console.say(f"{count} cards have been saved.")


def _import_flow(service: FlashcardService, console: SessionConsole) -> None:
    _load_cards(service, console, console.prompt("File name:"))


def _export_flow(service: FlashcardService, console: SessionConsole) -> None:
    _save_cards(service, console, console.prompt("File name:"))


def _ask_flow(service: FlashcardService, console: SessionConsole) -> None:
    """Quiz the user on cards in collection order."""
    raw_count = console.prompt("How many times to ask?")
    try:
        count = int(raw_count)
        terms = service.quiz_terms(count)
    except ValueError:
        logger.warning("Invalid question count %r", raw_count)
        console.say("The number of questions must be a non-negative integer.")
        return
    except LookupError:
        console.say("There are no cards to ask.")
        return

    for term in terms:
        answer = console.prompt(f'Print the definition of "{term}":')
        result = service.check_answer(term, answer)
        if result.correct:
            console.say("Correct!")
        elif result.matched_term is not None:
            console.say(
                f'Wrong. The right answer is "{result.expected}", '
                f'but your definition is correct for "{result.matched_term}".'
            )
        else:
            console.say(f'Wrong. The right answer is "{result.expected}".')


def _log_flow(console: SessionConsole) -> None:
    """Save the session transcript, including the file name just typed."""
    path = console.prompt("File name:")
    try:
        console.save(path)
    except OSError as exc:
        logger.warning("Saving log to %s failed: %s", path, exc)
        console.say("Error saving log.")
        return
    console.say("The log has been saved.")


def _hardest_card_flow(service: FlashcardService, console: SessionConsole) -> None:
    """Report the card or cards with the most mistakes."""
    hardest = service.hardest_cards()
    if hardest.mistakes == 0:
        console.say("There are no cards with errors.")
    elif len(hardest.terms) == 1:
        console.say(f'The hardest card is "{hardest.terms[0]}". You have {hardest.mistakes} errors answering it.')
    else:
        quoted = ", ".join(f'"{term}"' for term in hardest.terms)
        console.say(f"The hardest cards are {quoted}. You have {hardest.mistakes} errors answering them.")


def _reset_stats_flow(service: FlashcardService, console: SessionConsole) -> None:
    service.reset_stats()
    console.say("Card statistics have been reset.")


def _exit_flow(service: FlashcardService, console: SessionConsole) -> None:
    """Say goodbye and export to the startup target if one was configured."""
    console.say("Bye bye!")
    if service.export_path is not None:
        _save_cards(service, console, service.export_path)


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
