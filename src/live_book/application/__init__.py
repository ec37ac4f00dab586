"""Application services that orchestrate the live book."""

from live_book.application.live_book import (
    ALREADY_FINISHED_TEXT,
    EMPTY_HISTORY_TEXT,
    BookConfigError,
    LiveBook,
    UnknownChoiceError,
)

__all__ = [
    "ALREADY_FINISHED_TEXT",
    "EMPTY_HISTORY_TEXT",
    "BookConfigError",
    "LiveBook",
    "UnknownChoiceError",
]
