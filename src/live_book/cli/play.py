"""Interactive read-eval loop for playing a live book in the terminal."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from live_book.adapters.observability import configure_runtime_logging
from live_book.adapters.random_picker import RandomPicker
from live_book.api.contracts import load_book_config_json
from live_book.application.live_book import DEFAULT_HISTORY_LIMIT, BookConfigError, LiveBook
from live_book.stories import default_book_config

CLOSING_TEXT = "The living book closes for now."
INVALID_SELECTION_TEXT = "The page ripples, asking for a valid direction."
PROMPT_HINT = "Type the number of a choice, or 'summary', 'history', or 'quit'."


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Define CLI flags for an interactive live book session."""
    parser = argparse.ArgumentParser(description="Play an interactive three-act live book.")
    parser.add_argument(
        "--config",
        default="",
        help="Path to a story configuration JSON file (default: bundled Aurora in Motion).",
    )
    parser.add_argument(
        "--chapters-per-act",
        type=int,
        default=None,
        help="Override the number of chapters in each act.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for flavour text draws.")
    parser.add_argument(
        "--history-limit",
        type=_positive_int,
        default=DEFAULT_HISTORY_LIMIT,
        help="How many recent pages the 'history' command shows.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override LIVE_BOOK_LOG_LEVEL for this session.",
    )
    return parser


def build_book(parsed: argparse.Namespace) -> LiveBook:
    config_path = str(parsed.config).strip()
    try:
        config = load_book_config_json(Path(config_path)) if config_path else default_book_config()
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        raise SystemExit(f"Could not load story configuration: {exc}") from exc

    payload = config.model_dump()
    if parsed.chapters_per_act is not None:
        payload["chapters_per_act"] = int(parsed.chapters_per_act)
    try:
        return LiveBook(payload, picker=RandomPicker(seed=parsed.seed))
    except BookConfigError as exc:
        raise SystemExit(str(exc)) from exc


def run_session(
    book: LiveBook,
    read_line: Callable[[str], str],
    write: Callable[[str], None],
    *,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> None:
    """Drive ``book`` until it completes, the reader quits, or input runs out."""
    write(book.get_introduction())

    while not book.is_complete():
        choices = book.get_choices()
        write(f"\nAct {book.act_index + 1}: {book.act.name} - Chapter {book.chapter}")
        for index, option in enumerate(choices, start=1):
            write(f"  {index}. {option.label}")
        write(PROMPT_HINT)

        try:
            answer = read_line("> ").strip().lower()
        except EOFError:
            answer = "quit"

        if answer == "quit":
            write(CLOSING_TEXT)
            return
        if answer == "summary":
            write(f"\n{book.get_summary()}")
            continue
        if answer == "history":
            write(f"\n{book.get_history(history_limit)}")
            continue

        if not answer.isdecimal() or not 1 <= int(answer) <= len(choices):
            write(INVALID_SELECTION_TEXT)
            continue

        passage = book.generate_passage(choices[int(answer) - 1])
        write(f"\n{passage}\n")

    if book.epilogue:
        write(book.epilogue)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI flags and open an interactive live book session."""
    parser = build_arg_parser()
    parsed = parser.parse_args(argv)
    configure_runtime_logging(level_override=parsed.log_level)
    book = build_book(parsed)
    run_session(book, input, print, history_limit=int(parsed.history_limit))


if __name__ == "__main__":
    main()
