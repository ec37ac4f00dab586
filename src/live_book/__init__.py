"""Interactive three-act live book engine."""

from live_book.api.contracts import BookConfig
from live_book.application.live_book import BookConfigError, LiveBook, UnknownChoiceError
from live_book.domain.models import ACTS, Act, ArcStage, Character, Choice, HistoryEntry
from live_book.stories import default_book_config

__all__ = [
    "ACTS",
    "Act",
    "ArcStage",
    "BookConfig",
    "BookConfigError",
    "Character",
    "Choice",
    "HistoryEntry",
    "LiveBook",
    "UnknownChoiceError",
    "default_book_config",
]
