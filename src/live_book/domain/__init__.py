"""Domain models and ports for the live book."""

from live_book.domain.models import (
    ACTS,
    FINAL_ACT_INDEX,
    Act,
    ArcStage,
    Character,
    CharacterRoute,
    Choice,
    ChoiceRoute,
    HistoryEntry,
    TwistRoute,
    UnrecognizedRoute,
    WorldRoute,
    slugify,
)
from live_book.domain.ports import Picker

__all__ = [
    "ACTS",
    "FINAL_ACT_INDEX",
    "Act",
    "ArcStage",
    "Character",
    "CharacterRoute",
    "Choice",
    "ChoiceRoute",
    "HistoryEntry",
    "Picker",
    "TwistRoute",
    "UnrecognizedRoute",
    "WorldRoute",
    "slugify",
]
