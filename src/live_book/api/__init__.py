"""Public story configuration contracts."""

from live_book.api.contracts import (
    ArcStageBlock,
    BookConfig,
    CharacterBlock,
    load_book_config_json,
    save_book_config_json,
)

__all__ = [
    "ArcStageBlock",
    "BookConfig",
    "CharacterBlock",
    "load_book_config_json",
    "save_book_config_json",
]
